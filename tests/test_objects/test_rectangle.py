"""Tests for the Rectangle value."""

from objects_tasks import Rectangle


class TestRectangle:
    def test_fields(self):
        rect = Rectangle(10, 20)
        assert rect.width == 10
        assert rect.height == 20

    def test_area(self):
        assert Rectangle(10, 20).get_area() == 200

    def test_area_follows_updated_fields(self):
        rect = Rectangle(5, 5)
        rect.width = 3
        assert rect.get_area() == 15

    def test_zero_area(self):
        assert Rectangle(0, 7).get_area() == 0
