from tinytarget.board import Board
from tinytarget.glitchloop import LOOP_LIMIT, count_loop, glitch_loop


def test_count_loop_result():
    assert count_loop() == (200, 200, 40000)


def test_count_loop_is_square_of_limit():
    i, j, count = count_loop()
    assert (i, j) == (LOOP_LIMIT, LOOP_LIMIT)
    assert count == LOOP_LIMIT * LOOP_LIMIT


def test_glitch_loop_lines():
    out = []
    glitch_loop(out.append, Board(), 3)
    assert out[0] == "1: 200 200 40000\n"
    assert [line.split(":")[0] for line in out] == ["1", "2", "3"]


def test_glitch_loop_lines_share_result():
    out = []
    glitch_loop(out.append, Board(), 2)
    assert out[0].split(": ")[1] == out[1].split(": ")[1]


def test_glitch_loop_triggers_each_iteration():
    board = Board()
    glitch_loop([].append, board, 4)
    assert board.trigger_count == 4
    assert board.trigger is False


def test_glitch_loop_zero_iterations():
    out = []
    board = Board()
    glitch_loop(out.append, board, 0)
    assert out == []
    assert board.trigger_count == 0