"""
Profile figures at true aspect ratio, unlike the stretched interactive canvas.

A figure is built from a list of plot functions, each taking an Axes, so the
same curves can be replayed into the main view and the edge close-ups.
"""

import matplotlib.pyplot as plt


def plot_zoomed_view(
    ax,
    plot_functions,
    chord,
    zoom_type="LE",
    title=None,
    chord_fraction=0.05,
    bias=0.5,
):
    """
    Replay ``plot_functions`` on ``ax`` and zoom onto one edge of the section.

    Parameters
    ----------
    ax : matplotlib.axes.Axes
        Target axes.
    plot_functions : list of callable
        Each is called as ``func(ax)``.
    chord : float
        Chord length; the leading edge is at x=0, the trailing edge at x=chord.
    zoom_type : {"LE", "TE"}
        Edge to zoom onto.
    title : str, optional
        Overrides the "Leading Edge" / "Trailing Edge" title.
    chord_fraction : float
        Half-width of the window as a fraction of chord.
    bias : float
        Fraction of the half-width by which the window is pushed from the edge
        towards mid-chord, so more of the section than empty space is shown.

    Returns
    -------
    matplotlib.axes.Axes
    """
    if zoom_type.upper() == "LE":
        center_x, center_y = 0.0, 0.0
        default_title = "Leading Edge"
        direction = 1
    elif zoom_type.upper() == "TE":
        center_x, center_y = chord, 0.0
        default_title = "Trailing Edge"
        direction = -1
    else:
        raise ValueError(f"Invalid zoom_type '{zoom_type}'. Must be 'LE' or 'TE'.")

    zoom_size = chord * chord_fraction
    bias_offset = direction * zoom_size * bias

    for plot_func in plot_functions:
        plot_func(ax)

    ax.set_title(title if title is not None else default_title)
    ax.set_aspect("equal", adjustable="datalim")
    ax.set_xlim(center_x - zoom_size + bias_offset, center_x + zoom_size + bias_offset)
    ax.set_ylim(center_y - zoom_size, center_y + zoom_size)

    ax.set_xticks([])
    ax.set_yticks([])
    ax.grid(True, alpha=0.3)

    return ax


def create_multi_view_plot(
    plot_functions,
    chord,
    title="Profile",
    show_closeups=True,
    main_figsize=(12, 6),
    single_figsize=(8, 6),
    chord_fraction=0.05,
    bias=0.5,
):
    """
    Draw the profile on a main axes, optionally with LE and TE close-ups.

    ``chord_fraction`` and ``bias`` are passed through to
    :func:`plot_zoomed_view`.

    Returns
    -------
    tuple
        ``(fig, ax_main, ax_le, ax_te)`` with close-ups, else ``(fig, ax_main)``.
    """
    if show_closeups:
        fig = plt.figure(figsize=main_figsize)
        # Main view spans two columns, close-ups stacked in the third
        ax_main = fig.add_subplot(1, 3, (1, 2))
        ax_le = fig.add_subplot(2, 3, 3)
        ax_te = fig.add_subplot(2, 3, 6)
    else:
        fig, ax_main = plt.subplots(figsize=single_figsize)

    for plot_func in plot_functions:
        plot_func(ax_main)

    ax_main.set_title(title)
    ax_main.legend()
    ax_main.axis("equal")

    if not show_closeups:
        return fig, ax_main

    for ax, zoom_type in ((ax_le, "LE"), (ax_te, "TE")):
        plot_zoomed_view(
            ax,
            plot_functions,
            chord,
            zoom_type=zoom_type,
            chord_fraction=chord_fraction,
            bias=bias,
        )

    fig.tight_layout()
    return fig, ax_main, ax_le, ax_te
