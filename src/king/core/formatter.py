"""
Reply formatting - fixed-width text with word-preserving line wraps.

Pure functions - no I/O.
"""

from typing import Iterable

# Maximum number of characters across the chat window
CHAT_WIDTH = 50

# Past this column, the next space wraps the line so words stay intact
BUFFER = CHAT_WIDTH - 6

WRAP = "\n\t"

LOGO = (
    " ____  __.__\n"
    "|    |/ _|__| ____    ____\n"
    "|      < |  |/    \\  / ___\\\n"
    "|    |  \\|  |   |  \\/ /_/  >\n"
    "|____|__ \\__|___|  /\\___  /\n"
    "        \\/       \\//_____/\n"
)


def wrap_text(content: str) -> str:
    """
    Fold content that is too long for the chat window.

    Content of at most CHAT_WIDTH characters is returned unchanged. Longer
    content is scanned once: newlines reset the column, tabs are kept but not
    counted, and a line is broken (newline + tab) at the first space past
    BUFFER or at any character once CHAT_WIDTH is reached. Spaces at the
    start of a line created by a wrap are dropped.
    """
    if len(content) <= CHAT_WIDTH:
        return content

    out: list[str] = []
    column = 0
    after_wrap = False

    for c in content:
        if c == "\n":
            out.append(c)
            column = 0
            after_wrap = False
            continue
        if c == "\t":
            out.append(c)
            continue
        if (column >= BUFFER and c == " ") or column == CHAT_WIDTH:
            out.append(WRAP)
            column = 0
            after_wrap = True
        if c == " " and column == 0 and after_wrap:
            continue
        out.append(c)
        column += 1
        after_wrap = False

    return "".join(out)


def border(label: str, inset: int, symbol: str) -> str:
    """Line of `symbol` CHAT_WIDTH wide with `label` starting at column `inset`."""
    line = symbol * inset + label
    return line + symbol * max(CHAT_WIDTH - len(line), 0)


def chat_box(text: str) -> str:
    """Plain reply, wrapped to the chat width."""
    return wrap_text(text)


def boxed(text: str, label: str = "King says") -> str:
    """Legacy bordered chat box, kept for terminals that want framing."""
    return (
        f"\t{border(label, 5, '-')}\n"
        f"\t{wrap_text(text)}\n"
        f"\t{border('', CHAT_WIDTH, '-')}\n"
    )


def error_box(message: str) -> str:
    """Bordered box around an error message."""
    return (
        f"{border('Error Encountered', 4, '=')}\n"
        f"\t{wrap_text(message)}\n"
        f"{border('', CHAT_WIDTH, '=')}\n"
    )


def welcome() -> str:
    return f"{LOGO}\nHello! I'm King!\nWhat can I do for you?"


def farewell() -> str:
    return chat_box("Bye! Come back soon.")


def add_item_reply(task_text: str, count: int) -> str:
    return chat_box(
        "Got it. I've added this task:\n"
        f"\t{task_text}\n"
        f"Now you have {count} tasks in the list."
    )


def delete_item_reply(task_text: str, remaining: int) -> str:
    return chat_box(
        "I have deleted the following item:\n"
        f"\t{task_text}\n"
        f"You got {remaining} task(s) left."
    )


def done_reply(task_text: str) -> str:
    return chat_box(f"Nice! I've marked this task as done:\n\t{task_text}")


def _enumerate_lines(task_texts: list[str]) -> str:
    return "".join(f"\n\t  {number}. {text}" for number, text in enumerate(task_texts, start=1))


def task_list_reply(task_texts: Iterable[str]) -> str:
    """Numbered (1-based) listing of every task."""
    texts = list(task_texts)
    return chat_box(f"There are {len(texts)} items in your list:{_enumerate_lines(texts)}")


def found_items_reply(task_texts: Iterable[str]) -> str:
    """Numbered (1-based) listing of search matches."""
    texts = list(task_texts)
    return chat_box(
        f"I found {len(texts)} items with the given keyword(s):{_enumerate_lines(texts)}"
    )
