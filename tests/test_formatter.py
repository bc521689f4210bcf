"""Tests for reply formatting."""

import pytest

from king.core.formatter import (
    BUFFER,
    CHAT_WIDTH,
    add_item_reply,
    border,
    boxed,
    delete_item_reply,
    done_reply,
    error_box,
    farewell,
    found_items_reply,
    task_list_reply,
    welcome,
    wrap_text,
)


def visual_lines(text: str) -> list[str]:
    """Lines as the user sees them, minus uncounted tabs."""
    return [line.replace("\t", "") for line in text.split("\n")]


LONG_TEXT = (
    "The quick brown fox jumps over the lazy dog while the "
    "farmer watches from the porch and wonders about supper tonight"
)


class TestWrapText:
    def test_thresholds(self):
        assert CHAT_WIDTH == 50
        assert BUFFER == 44

    @pytest.mark.parametrize("text", ["", "short", "x" * 50, "a b\tc\nd"])
    def test_short_text_unchanged(self, text):
        assert wrap_text(text) == text

    def test_long_text_is_wrapped(self):
        wrapped = wrap_text(LONG_TEXT)
        assert "\n\t" in wrapped
        assert all(len(line) <= CHAT_WIDTH for line in visual_lines(wrapped))

    def test_breaks_at_space_past_buffer(self):
        text = "a" * 45 + " " + "b" * 10
        assert wrap_text(text) == "a" * 45 + "\n\t" + "b" * 10

    def test_hard_break_at_width(self):
        text = "x" * 120
        wrapped = wrap_text(text)
        assert wrapped == "x" * 50 + "\n\t" + "x" * 50 + "\n\t" + "x" * 20

    def test_no_non_space_character_lost(self):
        wrapped = wrap_text(LONG_TEXT)
        assert wrapped.replace("\n", "").replace("\t", "").replace(" ", "") == LONG_TEXT.replace(" ", "")

    def test_leading_spaces_after_wrap_dropped(self):
        text = "a" * 50 + "   " + "b" * 5
        assert wrap_text(text) == "a" * 50 + "\n\t" + "b" * 5

    def test_newline_resets_column(self):
        text = "a" * 40 + "\n" + "b" * 40
        assert wrap_text(text) == text

    def test_tabs_not_counted(self):
        text = "\t\t" + "a" * 50
        assert wrap_text(text) == text

    def test_indentation_after_newline_kept(self):
        text = "There are 2 items in your list:\n\t  1. [T][✗] read book\n\t  2. x"
        assert wrap_text(text) == text

    def test_no_line_exceeds_width_for_multiline(self):
        text = "\n".join([LONG_TEXT, "y" * 75, LONG_TEXT])
        assert all(len(line) <= CHAT_WIDTH for line in visual_lines(wrap_text(text)))


class TestBorder:
    def test_plain_border(self):
        assert border("", CHAT_WIDTH, "=") == "=" * 50

    def test_inset_label(self):
        line = border("Error Encountered", 4, "=")
        assert line.startswith("====Error Encountered=")
        assert len(line) == CHAT_WIDTH

    def test_label_too_long_not_padded(self):
        assert border("x" * 60, 2, "-") == "--" + "x" * 60


class TestReplies:
    def test_add_item(self):
        reply = add_item_reply("[T][✗] read book", 3)
        assert reply == (
            "Got it. I've added this task:\n"
            "\t[T][✗] read book\n"
            "Now you have 3 tasks in the list."
        )

    def test_delete_item(self):
        reply = delete_item_reply("[T][✗] read book", 2)
        assert "I have deleted the following item:" in reply
        assert "\t[T][✗] read book" in reply
        assert reply.endswith("You got 2 task(s) left.")

    def test_done(self):
        assert done_reply("[T][✓] x") == "Nice! I've marked this task as done:\n\t[T][✓] x"

    def test_task_list_numbered_from_one(self):
        reply = task_list_reply(["[T][✗] a", "[T][✗] b"])
        assert reply == "There are 2 items in your list:\n\t  1. [T][✗] a\n\t  2. [T][✗] b"

    def test_empty_task_list(self):
        assert task_list_reply([]) == "There are 0 items in your list:"

    def test_found_items(self):
        reply = found_items_reply(["[T][✗] read book"])
        assert reply.startswith("I found 1 items with the given keyword(s):")
        assert "\n\t  1. [T][✗] read book" in reply

    def test_long_task_is_wrapped(self):
        reply = add_item_reply(f"[T][✗] {LONG_TEXT}", 1)
        assert all(len(line) <= CHAT_WIDTH for line in visual_lines(reply))

    def test_error_box(self):
        box = error_box("'abc' is not a valid item number.")
        lines = box.split("\n")
        assert lines[0].startswith("====Error Encountered")
        assert lines[1] == "\t'abc' is not a valid item number."
        assert lines[2] == "=" * CHAT_WIDTH

    def test_boxed(self):
        box = boxed("hello")
        assert box.startswith("\t-----King says")
        assert "\thello\n" in box

    def test_welcome_and_farewell(self):
        assert "Hello! I'm King!" in welcome()
        assert farewell() == "Bye! Come back soon."
