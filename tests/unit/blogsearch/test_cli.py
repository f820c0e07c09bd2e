from pathlib import Path

import pytest

from blogsearch.cli import main

SAMPLE_DATA = str(Path(__file__).resolve().parents[3] / "data" / "blogs.json")


def test_search_prints_ranked_results(capsys):
    main(["--documents", SAMPLE_DATA, "search", "rust"])
    out = capsys.readouterr().out

    assert "Learning Rust" in out
    assert "[161.50]" in out
    assert "Draft: async Rust" not in out


def test_search_without_query_lists_by_recency(capsys):
    main(["--documents", SAMPLE_DATA, "search"])
    out = capsys.readouterr().out
    assert out.index("Habits that stick") < out.index("Learning Rust")


def test_show_prints_document(capsys):
    main(["--documents", SAMPLE_DATA, "show", "b_0001"])
    out = capsys.readouterr().out
    assert "Learning Rust" in out
    assert "Tags: rust, learning" in out


@pytest.mark.parametrize("doc_id", ["b_0003", "nope"])
def test_show_unpublished_exits_with_error(doc_id):
    with pytest.raises(SystemExit) as exc_info:
        main(["--documents", SAMPLE_DATA, "show", doc_id])
    assert exc_info.value.code == 1


def test_no_command_prints_help():
    with pytest.raises(SystemExit) as exc_info:
        main([])
    assert exc_info.value.code == 1
