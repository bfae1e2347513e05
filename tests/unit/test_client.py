"""Test the REST request builders and the batch update helper."""

import logging

import httplib2
import pytest
from googleapiclient.errors import HttpError
from slides_tools.client import SlidesClient
from slides_tools.page_objects import Page, Presentation, Thumbnail
from slides_tools.transport import ApiRequest, build_request, process_response
from slides_tools.update_requests import (
    BatchUpdatePresentationRequest,
    CreateSlideRequest,
    DeleteObjectRequest,
    Request,
    WriteControl,
)

BASE = "https://slides.googleapis.com/v1/presentations"


@pytest.fixture
def client(auth, http):
    return SlidesClient(auth, http=http)


def test_get_presentation_substitutes_path(client, http):
    http.reply({"presentationId": "pres-1", "title": "Deck", "slides": [{"objectId": "s1"}]})

    pres = client.get_presentation("pres-1")

    assert http.last["method"] == "GET"
    assert http.last["uri"] == f"{BASE}/pres-1?alt=json"
    assert http.last["body"] is None
    assert http.last["headers"]["authorization"] == "Bearer abc"
    assert isinstance(pres, Presentation)
    assert pres.title == "Deck"
    assert pres.slides[0].objectId == "s1"


def test_get_page_substitutes_both_ids(client, http):
    http.reply({"objectId": "slide-3", "pageType": "SLIDE"})

    page = client.get_page("pres-1", "slide-3")

    assert http.last["uri"] == f"{BASE}/pres-1/pages/slide-3?alt=json"
    assert "{" not in http.last["uri"]
    assert page == Page(objectId="slide-3", pageType="SLIDE")


def test_thumbnail_omits_unset_query_params(client, http):
    http.reply({"width": 800, "height": 450, "contentUrl": "https://lh3.example/thumb"})

    thumb = client.get_page_thumbnail("pres-1", "slide-3")

    uri = http.last["uri"]
    assert uri.startswith(f"{BASE}/pres-1/pages/slide-3/thumbnail?")
    assert "thumbnailProperties" not in uri
    assert "null" not in uri and "None" not in uri
    assert thumb == Thumbnail(width=800, height=450, contentUrl="https://lh3.example/thumb")


def test_thumbnail_sends_set_query_params(client, http):
    client.get_page_thumbnail("pres-1", "slide-3", thumbnailSize="LARGE", mimeType="PNG")

    uri = http.last["uri"]
    assert "thumbnailProperties.thumbnailSize=LARGE" in uri
    assert "thumbnailProperties.mimeType=PNG" in uri


def test_thumbnail_validates_enums_before_sending(client, http):
    with pytest.raises(ValueError):
        client.get_page_thumbnail("pres-1", "slide-3", thumbnailSize="HUGE")
    with pytest.raises(ValueError):
        client.get_page_thumbnail("pres-1", "slide-3", mimeType="JPEG")
    assert http.calls == []


def test_batch_update_forwards_body_verbatim(client, http):
    http.reply({
        "presentationId": "pres-1",
        "replies": [{"createSlide": {"objectId": "s9"}}, {}],
        "writeControl": {"requiredRevisionId": "rev-8"},
    })
    body = BatchUpdatePresentationRequest(
        requests=[
            Request(createSlide=CreateSlideRequest(objectId="s9")),
            Request(deleteObject=DeleteObjectRequest(objectId="old")),
        ],
        writeControl=WriteControl(requiredRevisionId="rev-7"),
    )

    response = client.batch_update("pres-1", body)

    assert http.last["method"] == "POST"
    assert http.last["uri"] == f"{BASE}/pres-1:batchUpdate?alt=json"
    assert http.last["headers"]["content-type"] == "application/json"
    assert http.last_json() == {
        "requests": [
            {"createSlide": {"objectId": "s9"}},
            {"deleteObject": {"objectId": "old"}},
        ],
        "writeControl": {"requiredRevisionId": "rev-7"},
    }
    assert response.replies[0].createSlide.objectId == "s9"


def test_create_presentation_posts_title(client, http):
    http.reply({"presentationId": "new-1", "title": "Fresh"})

    created = client.create_presentation(Presentation(title="Fresh"))

    assert http.last["uri"] == f"{BASE}?alt=json"
    assert http.last_json() == {"title": "Fresh"}
    assert created.presentationId == "new-1"


def test_http_errors_propagate_unchanged(client, http):
    http.reply({"error": {"code": 404, "message": "Requested entity was not found."}}, status=404)

    with pytest.raises(HttpError) as excinfo:
        client.get_presentation("missing")
    assert excinfo.value.resp.status == 404
    assert len(http.calls) == 1


def test_deauth_sends_api_key_instead_of_token(client, auth, http):
    auth.deauth()

    client.get_presentation("public-deck")

    assert "key=API-KEY" in http.last["uri"]
    assert "authorization" not in http.last["headers"]


def test_api_key_stays_out_of_logs(client, auth, http, caplog):
    auth.deauth()

    with caplog.at_level(logging.DEBUG, logger="slides_tools"):
        client.get_presentation("public-deck")

    assert "v1/presentations/public-deck" in caplog.text
    assert "API-KEY" not in caplog.text


def test_build_request_requires_every_placeholder(http):
    request = ApiRequest("GET", "v1/presentations/{presentationId}/pages/{pageObjectId}",
                         path_params={"presentationId": "p"})
    with pytest.raises(ValueError, match="pageObjectId"):
        build_request(request, http)


def test_build_request_strips_empty_query_values(http):
    request = ApiRequest(
        "GET",
        "v1/presentations/{presentationId}",
        path_params={"presentationId": "p"},
        query_params={"fields": "slides", "a": None, "b": "", "c": []},
    )
    uri = build_request(request, http).uri
    assert uri == "https://slides.googleapis.com/v1/presentations/p?fields=slides&alt=json"


def test_process_response():
    assert process_response(httplib2.Response({"status": "204"}), b"") == {}
    assert process_response(httplib2.Response({"status": "200"}), b'{"a": 1}') == {"a": 1}
    with pytest.raises(HttpError):
        process_response(httplib2.Response({"status": "500"}), b'{"error": {}}')


def test_batch_builder_collects_and_sends(client, http):
    http.reply({"presentationId": "pres-1", "replies": [{}, {}]})

    batch = client.batch("pres-1").pin_revision("rev-3")
    batch.add(Request(createSlide=CreateSlideRequest()))
    batch.add({"deleteObject": {"objectId": "gone"}})
    assert len(batch) == 2

    batch.send()

    assert http.last_json() == {
        "requests": [{"createSlide": {}}, {"deleteObject": {"objectId": "gone"}}],
        "writeControl": {"requiredRevisionId": "rev-3"},
    }
    assert len(batch) == 0


def test_batch_builder_rejects_empty_send_and_bad_items(client, http):
    batch = client.batch("pres-1")
    with pytest.raises(ValueError):
        batch.send()
    with pytest.raises(ValueError):
        batch.add(CreateSlideRequest())
    assert http.calls == []


def test_replies_with_newer_enum_values_still_decode(client, http):
    http.reply({
        "presentationId": "p",
        "slides": [{
            "objectId": "s1",
            "pageElements": [{"objectId": "e1", "shape": {"shapeType": "SOME_NEW_SHAPE"}}],
        }],
    })

    presentation = client.get_presentation("p")

    assert presentation.slides[0].pageElements[0].shape.shapeType == "SOME_NEW_SHAPE"


def test_batch_builder_validates_mapping_enums(client, http):
    batch = client.batch("pres-1")
    with pytest.raises(ValueError, match="shapeType"):
        batch.add({"createShape": {"shapeType": "BLOB"}})
    assert len(batch) == 0
