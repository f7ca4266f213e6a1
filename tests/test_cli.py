from blockfall.__main__ import main


def test_ascii_frame_shows_falling_piece(capsys):
    main(["--seed", "3"])
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 23
    assert all(len(line) == 10 for line in lines[:22])
    assert sum(ch != "." for line in lines[:22] for ch in line) == 4
    assert lines[-1] == "Score: 0"


def test_drops_lock_pieces(capsys):
    main(["--seed", "3", "--drops", "2"])
    lines = capsys.readouterr().out.splitlines()
    assert sum(ch != "." for line in lines[:22] for ch in line) == 12
    assert lines[-1].startswith("Score: 0")
