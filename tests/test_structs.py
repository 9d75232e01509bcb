import pytest

from ecosim.structs import Color, Food, Vector2D


def test_vector_defaults_to_origin():
    v = Vector2D()
    assert (v.x, v.y) == (0.0, 0.0)


def test_distance_worked_example():
    assert Vector2D(0.0, 0.0).distance(Vector2D(3.0, 4.0)) == pytest.approx(5.0)


def test_distance_is_symmetric_and_zero_to_self():
    a = Vector2D(1.5, -2.0)
    b = Vector2D(-7.0, 9.25)
    assert a.distance(b) == pytest.approx(b.distance(a))
    assert a.distance(a) == 0.0


def test_add_combines_components():
    assert Vector2D(1.0, 2.0) + Vector2D(3.0, 4.0) == Vector2D(4.0, 6.0)


def test_mul_scales_components():
    assert Vector2D(1.5, -2.0) * 2 == Vector2D(3.0, -4.0)


def test_mul_rejects_non_numbers():
    with pytest.raises(TypeError):
        Vector2D(1.0, 1.0) * "x"


def test_str_formatting():
    assert str(Vector2D(1.5, -2.0)) == "(1.5, -2)"


def test_color_default_is_white():
    assert Color() == Color(255, 255, 255, 255)


@pytest.mark.parametrize(
    "factory, expected",
    [
        (Color.red, (255, 0, 0, 255)),
        (Color.green, (0, 255, 0, 255)),
        (Color.blue, (0, 0, 255, 255)),
        (Color.yellow, (255, 255, 0, 255)),
    ],
)
def test_predefined_colors(factory, expected):
    c = factory()
    assert (c.r, c.g, c.b, c.a) == expected


@pytest.mark.parametrize("channels", [(256, 0, 0), (0, -1, 0), (0, 0, 0, 300)])
def test_color_rejects_out_of_range(channels):
    with pytest.raises(ValueError):
        Color(*channels)


def test_food_defaults():
    food = Food(Vector2D(10.0, 20.0))
    assert food.energy_value == 25.0
    assert food.color == Color.green()
    assert food.position == Vector2D(10.0, 20.0)