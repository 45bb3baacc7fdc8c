"""
Display of distance maps.

The display range of a distance map runs from 0 to the maximum distance over
the foreground, with a non-inverted colormap: background is black and pixels
far from the background are bright.
"""

from typing import Optional

import matplotlib.pyplot as plt

from distmap.core.distance_transform import DistanceMapResult


def display_range(result: DistanceMapResult):
    """Intensity range used to display a result."""
    # Keep a non-empty range for all-background masks
    return 0, max(result.max_value, 1)


def show_distance_map(result: DistanceMapResult, ax: Optional[plt.Axes] = None,
                      cmap: str = 'gray', title: Optional[str] = None,
                      colorbar: bool = True) -> plt.Axes:
    """
    Draw a distance map calibrated to its maximum value.

    Args:
        result: Result of a distance map computation
        ax: Optional axes to draw on
        cmap: Colormap name, must not be an inverted ("_r") map
        title: Optional title for the plot
        colorbar: Whether to add a colorbar

    Returns:
        The matplotlib Axes used for plotting
    """
    if cmap.endswith('_r'):
        cmap = cmap[:-2]

    if ax is None:
        fig = plt.figure(figsize=(8, 8))
        ax = fig.add_subplot(111)

    vmin, vmax = display_range(result)
    image = ax.imshow(result.distances, cmap=cmap, vmin=vmin, vmax=vmax, interpolation='nearest')
    if colorbar:
        ax.figure.colorbar(image, ax=ax)

    ax.set_xticks([])
    ax.set_yticks([])
    if title:
        ax.set_title(title)

    return ax


def save_preview(result: DistanceMapResult, path: str, title: Optional[str] = None) -> None:
    """Render a distance map to an image file."""
    fig, ax = plt.subplots(figsize=(8, 8))
    show_distance_map(result, ax=ax, title=title)
    fig.savefig(path, bbox_inches='tight')
    plt.close(fig)
