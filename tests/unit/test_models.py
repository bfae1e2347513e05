"""Test the data records: construction, validation and (de)serialisation."""

import dataclasses

import pytest
from slides_tools.models import AffineTransform, Dimension, OpaqueColor, RgbColor, Size
from slides_tools.page_objects import (
    Group,
    Page,
    PageElement,
    Presentation,
    Shape,
    TableCellLocation,
)
from slides_tools.text_objects import List, NestingLevel, ParagraphStyle, TextContent, TextStyle


def test_construction_stores_supplied_fields_only():
    """Supplied fields are stored as given, omitted ones stay None."""
    dim = Dimension(magnitude=12.5, unit="PT")
    assert dim.magnitude == 12.5
    assert dim.unit == "PT"

    transform = AffineTransform(scaleX=1, translateX=10)
    assert transform.scaleX == 1
    assert transform.translateX == 10
    assert transform.scaleY is None
    assert transform.unit is None


def test_unknown_field_is_rejected():
    with pytest.raises(TypeError):
        Dimension(magnitude=1, colour="red")


def test_records_are_immutable():
    dim = Dimension(magnitude=1, unit="EMU")
    with pytest.raises(dataclasses.FrozenInstanceError):
        dim.magnitude = 2


def test_enum_fields_are_validated():
    """Values outside the documented set raise, None is always fine."""
    with pytest.raises(ValueError, match="Dimension.unit"):
        Dimension(magnitude=1, unit="INCH")
    with pytest.raises(ValueError):
        Shape(shapeType="BLOB")
    with pytest.raises(ValueError):
        ParagraphStyle(alignment="MIDDLE")
    with pytest.raises(ValueError):
        TextStyle(baselineOffset="UP")
    with pytest.raises(ValueError):
        OpaqueColor(themeColor="PURPLE")

    assert Dimension(magnitude=1).unit is None
    assert Shape(shapeType="ROUND_RECTANGLE").shapeType == "ROUND_RECTANGLE"
    assert ParagraphStyle(alignment="CENTER", direction="LEFT_TO_RIGHT").alignment == "CENTER"
    assert OpaqueColor(themeColor="ACCENT1").themeColor == "ACCENT1"


def test_to_dict_drops_unset_fields_recursively():
    size = Size(width=Dimension(100, "PT"), height=Dimension(50))
    assert size.to_dict() == {
        "width": {"magnitude": 100, "unit": "PT"},
        "height": {"magnitude": 50},
    }

    color = OpaqueColor(rgbColor=RgbColor(red=1.0))
    assert color.to_dict() == {"rgbColor": {"red": 1.0}}


def test_to_dict_keeps_empty_records():
    assert Size().to_dict() == {}
    assert Size(width=Dimension()).to_dict() == {"width": {}}


def test_to_dict_keeps_falsy_values():
    """Zero and False are real values, only None is dropped."""
    loc = TableCellLocation(rowIndex=0, columnIndex=0)
    assert loc.to_dict() == {"rowIndex": 0, "columnIndex": 0}
    assert TextStyle(bold=False).to_dict() == {"bold": False}


def test_from_dict_builds_nested_records():
    payload = {
        "presentationId": "pres-1",
        "title": "Quarterly review",
        "revisionId": "rev-42",
        "pageSize": {"width": {"magnitude": 9144000, "unit": "EMU"}},
        "slides": [
            {
                "objectId": "slide-1",
                "pageType": "SLIDE",
                "pageElements": [
                    {
                        "objectId": "shape-1",
                        "shape": {
                            "shapeType": "TEXT_BOX",
                            "text": {
                                "textElements": [
                                    {"startIndex": 0, "endIndex": 6, "textRun": {"content": "Hello\n"}}
                                ]
                            },
                        },
                    }
                ],
            }
        ],
    }
    pres = Presentation.from_dict(payload)

    assert pres.presentationId == "pres-1"
    assert pres.revisionId == "rev-42"
    assert isinstance(pres.pageSize.width, Dimension)
    assert pres.pageSize.width.magnitude == 9144000

    slide = pres.slides[0]
    assert isinstance(slide, Page)
    element = slide.pageElements[0]
    assert isinstance(element, PageElement)
    assert isinstance(element.shape, Shape)
    assert element.shape.text.textElements[0].textRun.content == "Hello\n"


def test_from_dict_ignores_unknown_keys():
    page = Page.from_dict({"objectId": "p1", "someNewServerField": {"x": 1}})
    assert page == Page(objectId="p1")


def test_from_dict_keeps_enum_values_it_does_not_know():
    presentation = Presentation.from_dict({
        "presentationId": "p",
        "slides": [{
            "objectId": "s1",
            "pageElements": [{"objectId": "e1", "shape": {"shapeType": "SOME_NEW_SHAPE"}}],
        }],
    })
    assert presentation.slides[0].pageElements[0].shape.shapeType == "SOME_NEW_SHAPE"

    with pytest.raises(ValueError, match="Shape.shapeType"):
        Shape(shapeType="SOME_NEW_SHAPE")


def test_from_dict_validates_enums_on_request():
    with pytest.raises(ValueError, match="Dimension.unit"):
        Size.from_dict({"width": {"magnitude": 1, "unit": "INCH"}}, validate=True)
    # a lenient decode does not leak into later construction
    Size.from_dict({"width": {"magnitude": 1, "unit": "INCH"}})
    with pytest.raises(ValueError):
        Dimension(magnitude=1, unit="INCH")


def test_from_dict_decodes_keyed_maps():
    content = TextContent.from_dict({
        "lists": {
            "list-1": {
                "listId": "list-1",
                "nestingLevel": {"0": {"bulletStyle": {"bold": True}}},
            }
        }
    })
    listing = content.lists["list-1"]
    assert isinstance(listing, List)
    assert isinstance(listing.nestingLevel["0"], NestingLevel)
    assert listing.nestingLevel["0"].bulletStyle.bold is True


def test_group_children_resolve_to_page_elements():
    element = PageElement.from_dict({
        "objectId": "group-1",
        "elementGroup": {"children": [{"objectId": "a"}, {"objectId": "b"}]},
    })
    assert isinstance(element.elementGroup, Group)
    assert [child.objectId for child in element.elementGroup.children] == ["a", "b"]
    assert all(isinstance(child, PageElement) for child in element.elementGroup.children)


def test_round_trip_preserves_payload():
    payload = {
        "objectId": "slide-9",
        "pageType": "SLIDE",
        "pageElements": [{"objectId": "img", "image": {"contentUrl": "https://example.com/a.png"}}],
    }
    assert Page.from_dict(payload).to_dict() == payload
