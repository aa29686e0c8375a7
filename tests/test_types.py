import json

import pytest
from pydantic import ValidationError

from craftblocks.types import AUTO_WIDTH, Block, BlockType, Position, SearchMatch, TextStyle


def test_width_auto_and_pixels_decode_distinctly() -> None:
    auto = Block.model_validate_json('{"id": "1", "type": "image", "width": "auto"}')
    pixels = Block.model_validate_json('{"id": "2", "type": "image", "width": 600}')

    assert auto.width == AUTO_WIDTH
    assert auto.is_auto_width
    assert pixels.width == 600
    assert isinstance(pixels.width, int)
    assert not pixels.is_auto_width


def test_width_keeps_its_json_shape_on_encode() -> None:
    assert Block(type="image", width="auto").to_request()["width"] == "auto"
    assert Block(type="image", width=320).to_request()["width"] == 320


def test_width_rejects_other_strings() -> None:
    with pytest.raises(ValidationError):
        Block.model_validate({"type": "image", "width": "wide"})


def test_to_request_uses_camel_case_and_omits_unset_fields() -> None:
    block = Block(type=BlockType.TEXT, markdown="# Title", text_style=TextStyle.H1, indentation_level=2)

    assert block.to_request() == {
        "type": "text",
        "textStyle": "h1",
        "markdown": "# Title",
        "indentationLevel": 2,
    }


def test_to_request_drops_server_only_fields_recursively() -> None:
    child = Block(type="file", file_name="a.pdf", mime_type="application/pdf", file_size=12)
    parent = Block(type="page", markdown="Files", content=[child], mime_type="x", file_size=1)

    payload = parent.to_request()

    assert "mimeType" not in payload
    assert "fileSize" not in payload
    assert payload["content"] == [{"type": "file", "fileName": "a.pdf"}]
    # a plain dump still carries what the server sent
    assert parent.model_dump(by_alias=True)["content"][0]["mimeType"] == "application/pdf"


def test_block_decodes_metadata_and_ignores_unknown_fields() -> None:
    block = Block.model_validate_json(
        json.dumps(
            {
                "id": "f1",
                "type": "file",
                "fileName": "report.pdf",
                "mimeType": "application/pdf",
                "fileSize": 2048,
                "somethingNew": True,
            }
        )
    )

    assert block.file_name == "report.pdf"
    assert block.mime_type == "application/pdf"
    assert block.file_size == 2048


def test_block_type_defaults_to_text() -> None:
    assert Block.model_validate({"id": "1", "markdown": "hi"}).type == BlockType.TEXT


def test_walk_visits_blocks_in_document_order() -> None:
    tree = Block.model_validate(
        {
            "id": "root",
            "type": "page",
            "content": [
                {"id": "a", "content": [{"id": "a1"}, {"id": "a2"}]},
                {"id": "b"},
            ],
        }
    )

    assert [b.id for b in tree.walk()] == ["root", "a", "a1", "a2", "b"]
    assert tree.count() == 5
    assert Block(id="leaf").count() == 1


@pytest.mark.parametrize(
    "position, expected",
    [
        (Position.start("p"), {"position": "start", "pageId": "p"}),
        (Position.end("p"), {"position": "end", "pageId": "p"}),
        (Position.before("s"), {"position": "before", "siblingId": "s"}),
        (Position.after("s"), {"position": "after", "siblingId": "s"}),
    ],
)
def test_position_serializes_one_target(position: Position, expected: dict) -> None:
    assert position.to_request() == expected


def test_search_match_decodes_path_and_context() -> None:
    match = SearchMatch.model_validate(
        {
            "blockId": "m",
            "markdown": "TODO: ship",
            "pageBlockPath": [{"id": "0", "content": "Root"}, {"id": "p", "content": "Plans"}],
            "beforeBlocks": [{"blockId": "b1", "markdown": "before"}],
            "afterBlocks": None,
        }
    )

    assert match.block_id == "m"
    assert [p.content for p in match.page_block_path] == ["Root", "Plans"]
    assert match.before_blocks[0].block_id == "b1"
    assert match.after_blocks == []
