"""Test the shape request builders."""

from slides_tools.shapes import (
    RECTANGLE_FIELDS,
    circle_request,
    new_object_id,
    rectangle_requests,
)
from slides_tools.update_requests import Request


def test_new_object_id():
    a, b = new_object_id("CIRCLE"), new_object_id("CIRCLE")
    assert a != b
    assert a.startswith("CIRCLE_")
    assert 5 <= len(a) <= 50
    assert len(new_object_id("X" * 80)) == 50


def test_circle_request():
    req = circle_request("page-1", 10, 20, r=5)

    assert isinstance(req, Request)
    assert req.kind == "createShape"
    shape = req.createShape
    assert shape.shapeType == "ELLIPSE"
    assert shape.objectId.startswith("CIRCLE_")
    props = shape.elementProperties.to_dict()
    assert props == {
        "pageObjectId": "page-1",
        "size": {
            "width": {"magnitude": 10, "unit": "PT"},
            "height": {"magnitude": 10, "unit": "PT"},
        },
        "transform": {
            "scaleX": 1, "scaleY": 1, "shearX": 0, "shearY": 0,
            "translateX": 5, "translateY": 15, "unit": "PT",
        },
    }


def test_circle_default_radius():
    props = circle_request("page-1", 3, 3).createShape.elementProperties
    assert props.size.width.magnitude == 2
    assert props.transform.translateX == 2


def test_rectangle_requests():
    create, style = rectangle_requests(
        "page-1", "rect-1", x0=0, x1=100, y0=80, y1=20,
        col=(0, 0, 0, 1), fill=(1, 0.5, 0, 0.25),
    )

    assert create.kind == "createShape"
    shape = create.createShape
    assert shape.objectId == "rect-1"
    assert shape.shapeType == "RECTANGLE"
    assert shape.elementProperties.size.width.magnitude == 100
    assert shape.elementProperties.size.height.magnitude == 60
    assert shape.elementProperties.transform.translateX == 0
    assert shape.elementProperties.transform.translateY == 20

    assert style.kind == "updateShapeProperties"
    update = style.to_dict()["updateShapeProperties"]
    assert update["objectId"] == "rect-1"
    assert update["fields"] == RECTANGLE_FIELDS
    assert update["shapeProperties"]["shapeBackgroundFill"] == {
        "solidFill": {"color": {"rgbColor": {"red": 1, "green": 0.5, "blue": 0}}, "alpha": 0.25}
    }
    assert update["shapeProperties"]["outline"]["outlineFill"]["solidFill"]["alpha"] == 1


def test_rectangle_fields_string():
    assert RECTANGLE_FIELDS == (
        "shapeBackgroundFill.solidFill.color,shapeBackgroundFill.solidFill.alpha,"
        "outline.outlineFill.solidFill.color,outline.outlineFill.solidFill.alpha"
    )
