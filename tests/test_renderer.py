from term_menu.models import MultiSelection, SingleSelection
from term_menu.ui.renderer import Renderer
from term_menu.ui.terminal import TerminalControl

GREEN_CHECK = "[\x1b[38;5;46m✔\x1b[0m]"


def make_renderer(make_term):
    term = make_term()
    return term, Renderer(TerminalControl(term))


def test_inactive_line(make_term):
    term, renderer = make_renderer(make_term)
    renderer.draw_inactive("Apple", "[ ]")
    assert term.output == "[ ]\t\x1b[0mApple"


def test_active_line_is_reverse_video(make_term):
    term, renderer = make_renderer(make_term)
    renderer.draw_active("Apple", " ⬤ ")
    assert term.output == " ⬤ \t\x1b[7mApple\x1b[27m"


def test_checkmark_prefix_is_colored(make_term):
    term, renderer = make_renderer(make_term)
    renderer.draw_active("Apple", "[✔]")
    assert term.output == f"{GREEN_CHECK}\t\x1b[7mApple\x1b[27m"


def test_print_options_highlights_active_row(make_term):
    term, renderer = make_renderer(make_term)
    selection = MultiSelection(("A", "B"), checked=[False, True])
    selection.active = 1

    renderer.print_options(selection, start_row=7)

    assert term.output == (
        "\x1b[7;1H[ ]\t\x1b[0mA"
        f"\x1b[8;1H{GREEN_CHECK}\t\x1b[7mB\x1b[27m"
    )


def test_print_options_out_of_range_draws_everything_inactive(make_term):
    term, renderer = make_renderer(make_term)
    selection = SingleSelection(("A", "B"), selected=0)

    renderer.print_options(selection, start_row=1, active_index=-1)

    assert "\x1b[7m" not in term.output
    assert term.output == "\x1b[1;1H ◯ \t\x1b[0mA\x1b[2;1H ⬤ \t\x1b[0mB"


def test_legend(make_term):
    term, renderer = make_renderer(make_term)
    renderer.print_legend()
    assert term.output.splitlines() == [
        "↓ (Down Arrow)\t=> down",
        "↑ (Up Arrow)\t=> up",
        "⎵ (Space)\t=> toggle selection",
        "⏎ (Enter)\t=> confirm selection",
        "",
    ]
