# tests/test_cli.py

from __future__ import annotations

import io
import json

import pytest

from boardflow.cli import main as cli_main
from boardflow.core import board_actions as ba

from .fakes import make_state


@pytest.mark.asyncio
async def test_replay_prints_every_published_action(settings) -> None:
    out = io.StringIO()
    state = make_state(page_index=2, ids_count=50)

    code = await cli_main.replay([ba.scroll_bottom()], settings=settings, state=state, out=out)

    assert code == 0
    lines = [json.loads(line) for line in out.getvalue().splitlines()]
    assert lines == [
        {"type": "SCROLL_BOTTOM"},
        {"type": "BOARDS_SET_PAGE_INDEX", "payload": {"pageIndex": 3}},
    ]


def test_main_rejects_unreadable_input(tmp_path, monkeypatch) -> None:
    monkeypatch.setattr(cli_main, "setup_logging", lambda **kwargs: None)
    state_file = tmp_path / "state.json"
    state_file.write_text(json.dumps(make_state()), "utf-8")

    code = cli_main.main(["--state", str(state_file), "--actions", str(tmp_path / "missing.json")])

    assert code == 2
