"""
Tests for the frame renderer.
"""

# Path setup handled by conftest.py
from rich.layout import Layout
from rich.padding import Padding

from jotter.core.models import AppState, Mode
from jotter.tui.display import build_layout, format_task, help_text, menu_text, tasks_text


def render(console, state: AppState) -> str:
    """Print one frame and return the text written since the last call."""
    console.file.seek(0)
    console.file.truncate()
    console.print(build_layout(state), height=console.height)
    return console.file.getvalue()


def test_format_task():
    """Rows are '<index>: <text>'."""
    assert format_task(0, "buy milk") == "0: buy milk"
    assert format_task(12, "") == "12: "


def test_tasks_text_order_and_indexes():
    """Tasks are listed in insertion order, indexed from zero."""
    text = tasks_text(["buy milk", "walk dog", "buy milk"])

    assert text.plain == "0: buy milk\n1: walk dog\n2: buy milk"

    print("✓ Task list rows are indexed from zero")


def test_tasks_text_empty():
    assert tasks_text([]).plain == ""


def test_menu_has_single_home_tab():
    assert menu_text().plain == "Home"


def test_help_text_per_mode():
    """Help line explains the keys of the current mode."""
    normal = help_text(Mode.NORMAL)
    editing = help_text(Mode.EDITING)

    assert normal.plain == "Press q to exit, a to add task"
    assert editing.plain == "Press Esc to stop adding, Enter to add task in todo list"

    bold = [normal.plain[span.start:span.end] for span in normal.spans if span.style == "bold"]
    assert bold == ["q", "a"]

    bold = [editing.plain[span.start:span.end] for span in editing.spans if span.style == "bold"]
    assert bold == ["Esc", "Enter"]

    print("✓ Help line changes with mode")


def test_frame_contents_normal(screen):
    """A Normal-mode frame shows every section."""
    state = AppState(tasks=["buy milk", "walk dog"], input="draft")

    output = render(screen, state)

    assert "Menu" in output
    assert "Home" in output
    assert "Press q to exit, a to add task" in output
    assert "Input" in output
    assert "draft" in output
    assert "Tasks" in output
    assert "0: buy milk" in output
    assert "1: walk dog" in output
    assert output.index("0: buy milk") < output.index("1: walk dog")

    print("✓ Normal frame renders all sections")


def test_frame_contents_editing(screen):
    """An Editing-mode frame shows the editing help line."""
    state = AppState(input="typing", mode=Mode.EDITING)

    output = render(screen, state)

    assert "Press Esc to stop adding, Enter to add task in todo list" in output
    assert "typing" in output


def test_task_text_is_not_markup(screen):
    """Rich markup in a task is shown literally."""
    state = AppState(tasks=["[bold]not bold[/bold]"], input="[red]raw")

    output = render(screen, state)

    assert "0: [bold]not bold[/bold]" in output
    assert "[red]raw" in output


def test_input_highlighted_only_while_editing():
    """The input box is yellow in Editing mode and plain in Normal mode."""
    editing = build_layout(AppState(mode=Mode.EDITING)).renderable
    normal = build_layout(AppState()).renderable

    assert editing["input"].renderable.style == "yellow"
    assert normal["input"].renderable.style == "none"

    print("✓ Input box is highlighted only while editing")


def test_layout_sections_in_order():
    """Menu, help, input, tasks, top to bottom."""
    layout = build_layout(AppState()).renderable

    assert [child.name for child in layout.children] == ["menu", "help", "input", "tasks"]
    assert layout["tasks"].ratio == 1


def test_render_is_idempotent(screen):
    """Same state, same size, same frame."""
    state = AppState(tasks=["a", "b", "c"], input="xyz", mode=Mode.EDITING)

    first = render(screen, state)
    second = render(screen, state)

    assert first == second

    print("✓ Rendering twice gives identical output")


def test_render_does_not_mutate_state(screen):
    state = AppState(tasks=["a"], input="b", mode=Mode.EDITING)
    snapshot = AppState(tasks=list(state.tasks), input=state.input, mode=state.mode)

    render(screen, state)

    assert state == snapshot


def test_frame_follows_console_size(screen):
    """A wider console produces wider lines."""
    narrow = render(screen, AppState(tasks=["x"]))

    screen.width = 90
    wide = render(screen, AppState(tasks=["x"]))

    assert max(len(line) for line in wide.splitlines()) > max(len(line) for line in narrow.splitlines())


def test_build_layout_wraps_layout_in_margin():
    """The frame is a Layout inside the outer margin."""
    frame = build_layout(AppState())

    assert isinstance(frame, Padding)
    assert isinstance(frame.renderable, Layout)
    assert (frame.top, frame.right, frame.bottom, frame.left) == (2, 2, 2, 2)
