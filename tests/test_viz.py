import matplotlib
import pytest

from conftest import HELLO

matplotlib.use("Agg")

from bitlab import viz  # noqa: E402


def test_render_field_grid():
    fig = viz.render_field(HELLO, 1, 7, 3)
    ax = fig.axes[0]
    assert len(ax.patches) == 16  # bytes 1 and 2
    assert [t.get_text() for t in ax.texts[:8]] == list("01100001")
    assert "bits 15..17" in ax.get_title()


def test_render_field_context_clamped():
    fig = viz.render_field(HELLO, 0, 0, 4, context=3)
    assert len(fig.axes[0].patches) == 8 * 4


def test_render_field_negative_context():
    with pytest.raises(ValueError):
        viz.render_field(HELLO, 1, 0, 4, context=-1)


def test_plot_field_shows(monkeypatch):
    import matplotlib.pyplot as plt
    shown = []
    monkeypatch.setattr(plt, "show", lambda: shown.append(True))
    viz.plot_field(HELLO, 0, 0, 8)
    assert shown == [True]
