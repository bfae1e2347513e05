#!/usr/bin/env python3
"""Minimal end-to-end demo: pick (or create) a presentation, add a slide with
a title, a couple of shapes, then fetch a thumbnail of the new slide.

Prerequisites
-------------
1. `pip install -e .`
2. Either
   • *Service-account JSON* – set env var `GOOGLE_SLIDES_CREDENTIALS` to the
     JSON file, **or**
   • *OAuth client* – put your console JSON in `SLIDES_TOOLS_CLIENT_SECRETS`;
     the first run opens a browser window, afterwards the cached token is reused.

Pass `--pick` to choose an existing presentation with the Google Picker
instead of creating a new one.
"""
from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

project_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_root))

from slides_tools import AuthState, Request, SlidesClient, SlidesConfig, choose_presentation
from slides_tools.page_objects import Presentation
from slides_tools.shapes import circle_request, element_properties, new_object_id, rectangle_requests
from slides_tools.update_requests import (
    CreateShapeRequest,
    CreateSlideRequest,
    InsertTextRequest,
    LayoutReference,
)

NOTEPAD = project_root / "slides_notepad.json"


def _load_last_id():
    if NOTEPAD.exists():
        try:
            return json.loads(NOTEPAD.read_text()).get("presentation_id")
        except (OSError, ValueError):
            return None
    return None


def _save_last_id(pid: str):
    try:
        NOTEPAD.write_text(json.dumps({"presentation_id": pid}))
    except OSError:
        pass


def run_demo(pick: bool = False):
    config = SlidesConfig.from_env()
    auth = AuthState(config)
    client = SlidesClient(auth)

    if pick:
        presentation_id = choose_presentation(auth, timeout=300)
    else:
        presentation_id = _load_last_id()
    if not presentation_id:
        presentation_id = client.create_presentation(Presentation(title="slides_tools demo")).presentationId
    _save_last_id(presentation_id)
    print(f"📄 Working on presentation {presentation_id}")

    slide_id = new_object_id("SLIDE")
    title_id = new_object_id("TITLE")
    batch = client.batch(presentation_id)
    batch.add(
        Request(createSlide=CreateSlideRequest(
            objectId=slide_id,
            slideLayoutReference=LayoutReference(predefinedLayout="BLANK"),
        )),
        Request(createShape=CreateShapeRequest(
            objectId=title_id,
            shapeType="TEXT_BOX",
            elementProperties=element_properties(slide_id, 500, 50, 40, 30),
        )),
        Request(insertText=InsertTextRequest(objectId=title_id, text="Hello from slides_tools")),
    )
    batch.extend(rectangle_requests(
        slide_id, new_object_id("RECT"), 60, 260, 300, 120,
        col=(0.1, 0.1, 0.1, 1.0), fill=(0.2, 0.5, 0.9, 0.6),
    ))
    batch.add(circle_request(slide_id, 400, 200, r=30))
    reply = batch.send()
    print(f"✅ Created {len(reply.object_ids())} objects")

    thumb = client.get_page_thumbnail(presentation_id, slide_id, thumbnailSize="MEDIUM")
    print("🖼  Thumbnail:", thumb.contentUrl)
    print(f"   https://docs.google.com/presentation/d/{presentation_id}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s  %(message)s")
    try:
        run_demo(pick="--pick" in sys.argv)
    except Exception as exc:
        print("❌ Demo failed:", exc)
        raise
