# region Imports
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.lines import Line2D
from matplotlib.patches import Patch

from hillclimb.models import idx_to_rc
# endregion

# region Visualization Function
def show_search_heatmap(
    hmap,
    result,
    start,
    goal,
    title="Uniform-cost search",
    show=True,
):
    """
    Render the elevation grid with the search's settled order overlaid.
    start and goal are Locations. Returns the Figure.
    """
    H, W = hmap.shape

    fig, ax = plt.subplots(figsize=(max(4, W / 8), max(3, H / 8)))
    ax.imshow(hmap.elevation, origin="upper", cmap="terrain", alpha=0.9)

    # region Expansion Heat Overlay
    if result.settled_order:
        order_map = np.full((H, W), np.nan, dtype=np.float32)
        for i, node in enumerate(result.settled_order):
            r, c = idx_to_rc(node, W)
            order_map[r, c] = i + 1
        order_map /= max(1.0, float(np.nanmax(order_map)))
        heat = ax.imshow(order_map, origin="upper", cmap="viridis", alpha=0.6)
        cbar = fig.colorbar(heat, ax=ax, fraction=0.046, pad=0.04)
        cbar.set_label("settled (early → late)")
    # endregion

    ax.scatter(start.col, start.row, s=100, edgecolors="black", facecolors="white", zorder=3)
    ax.scatter(goal.col, goal.row, s=100, edgecolors="black", facecolors="yellow", zorder=3)

    # region Legend / Layout
    steps = "no path" if result.cost is None else f"{result.cost} steps"
    legend_elements = [
        Line2D([0], [0], marker="o", color="w", label="Start",
               markerfacecolor="white", markeredgecolor="black", markersize=9),
        Line2D([0], [0], marker="o", color="w", label="Goal",
               markerfacecolor="yellow", markeredgecolor="black", markersize=9),
        Patch(facecolor="purple", label="Early settled"),
        Patch(facecolor="yellow", label="Late settled"),
    ]
    ax.legend(handles=legend_elements, loc="lower right", fontsize=8, framealpha=0.85)
    ax.set_title(f"{title} ({steps}, {result.expansions} settled)")
    ax.set_axis_off()
    plt.tight_layout()
    if show:
        plt.show()
    return fig
    # endregion
# endregion
