from robotarena.vis.console import ConsoleCanvas, render_arena


def test_empty_canvas_has_border():
    assert str(ConsoleCanvas(3, 2)) == "#####\n#   #\n#   #\n#####\n"


def test_title_is_centred_in_top_border():
    canvas = ConsoleCanvas(6, 1, "ab")
    assert str(canvas).splitlines()[0] == "###ab###"


def test_long_title_is_clipped():
    canvas = ConsoleCanvas(1, 1, "abcdef")
    assert str(canvas).splitlines()[0] == "abc"


def test_show_it_offsets_by_border_and_clear_resets():
    canvas = ConsoleCanvas(3, 2)
    canvas.show_it(0, 0, "R")
    canvas.show_it(2, 1, "R")
    assert str(canvas) == "#####\n#R  #\n#  R#\n#####\n"
    canvas.clear()
    assert str(canvas) == "#####\n#   #\n#   #\n#####\n"


def test_cells_outside_the_grid_are_ignored():
    rendered = render_arena(2, 2, [(5, 5), (-1, 0), (1, 0)])
    assert rendered == "####\n# R#\n#  #\n####\n"
