import pytest

from tinkerbox.tones import (
    MAX_AMPLITUDE,
    Note,
    canon_samples,
    chord_sample,
    encode_sample,
    main,
    piano_frequency,
    render_track,
    track_names,
    write_tracks,
)


def test_note_numbering():
    assert len(Note) == 88
    assert Note.A4 == 49
    assert piano_frequency(Note.A0) == pytest.approx(27.5)
    assert piano_frequency(Note.C8) == pytest.approx(4186.009, rel=1e-6)


def test_piano_frequency_of_a4():
    assert piano_frequency(Note.A4) == 440.0


def test_piano_octave_doubles():
    assert piano_frequency(Note.C5) / piano_frequency(Note.C4) == pytest.approx(2.0)


def test_chord_sample_at_zero_is_midpoint():
    assert chord_sample(100, 0, 44100, [Note.C4, Note.E4]) == 50


def test_chord_sample_in_range():
    notes = [Note.C4, Note.E4, Note.G4, Note.B4]
    values = [chord_sample(MAX_AMPLITUDE, t, 44100, notes) for t in range(300)]
    assert all(0 <= v <= MAX_AMPLITUDE for v in values)


def test_chord_sample_needs_notes():
    with pytest.raises(ValueError):
        chord_sample(MAX_AMPLITUDE, 0, 44100, [])


def test_encode_sample_bytes():
    assert encode_sample(MAX_AMPLITUDE) == b"\xff\x08"
    assert len(encode_sample(0)) == 2


def test_encode_sample_range():
    with pytest.raises(ValueError):
        encode_sample(-1)
    with pytest.raises(ValueError):
        encode_sample(MAX_AMPLITUDE + 1)


def test_track_names():
    names = track_names()
    assert names[0] == "1000"
    assert names[-1] == "canon"
    assert len(names) == len(set(names))


def test_const_track():
    assert render_track("const", 44100, 10) == [MAX_AMPLITUDE] * 10


def test_max_min_alternates():
    assert render_track("max_min", 44100, 4) == [0, MAX_AMPLITUDE, 0, MAX_AMPLITUDE]


def test_dual_has_two_channels():
    assert len(render_track("dual", 44100, 12)) == 24


def test_all_tracks_in_range():
    for name in track_names():
        if name == "canon":
            continue
        values = render_track(name, 44100, 64)
        assert all(0 <= v <= MAX_AMPLITUDE for v in values), name


def test_unknown_track():
    with pytest.raises(ValueError):
        render_track("nope", 44100, 10)


def test_saw_needs_high_rate():
    with pytest.raises(ValueError):
        render_track("saw", 100, 5)


def test_canon_track_matches_canon_samples():
    assert render_track("canon", 1000, 5) == canon_samples(1000)


def test_canon_scales_with_rate():
    assert len(canon_samples(2000)) == 2 * len(canon_samples(1000))


def test_write_tracks(tmp_path):
    paths = write_tracks(tmp_path, sample_rate=1000, seconds=0.01)
    assert len(paths) == len(track_names())
    const = tmp_path / "tmp.const.raw"
    assert const.read_bytes() == encode_sample(MAX_AMPLITUDE) * 10


def test_main_writes_files(tmp_path):
    code = main(["--directory", str(tmp_path), "--sample-rate", "1000", "--seconds", "0.01"])
    assert code == 0
    assert (tmp_path / "tmp.canon.raw").stat().st_size == 2 * len(canon_samples(1000))