# graphing_manager.py

import matplotlib.pyplot as plt
from matplotlib.patches import Polygon
import logger as log
import constants as C

class GraphingManager:
    """
    Collects growth statistics while a tree is being filled and renders the
    tree's triangles and points with matplotlib.
    """
    def __init__(self):
        self.data = {
            'attempts': [],
            'points': [],
            'nodes': [],
            'max_depth': [],
        }
        log.log("GraphingManager initialized.")

    def record(self, tree, attempts=None):
        """
        Adds a single data point describing the tree after `attempts` insertion
        attempts in total (defaults to one more than the previous record).
        """
        if attempts is None:
            attempts = self.data['attempts'][-1] + 1 if self.has_data() else 1
        self.data['attempts'].append(attempts)
        self.data['points'].append(tree.count_points())
        self.data['nodes'].append(tree.size())
        self.data['max_depth'].append(tree.max_depth())

    def clear(self):
        for key in self.data:
            self.data[key].clear()

    def has_data(self):
        return len(self.data['attempts']) > 0

    def draw_tree(self, ax, tree, draw_points=True):
        """Draws the outline of every node's triangle, and optionally the resident points."""
        for node in tree.walk():
            corners = [(c.x, c.y) for c in node.region.corners()]
            is_root = node is tree
            ax.add_patch(Polygon(
                corners,
                closed=True,
                fill=False,
                edgecolor='black' if is_root else 'tab:blue',
                linewidth=C.PLOT_NODE_LINE_WIDTH * (3 if is_root else 1),
            ))

        if draw_points:
            stored = tree.points()
            if stored:
                ax.scatter([p.x for p in stored], [p.y for p in stored],
                           s=C.PLOT_POINT_SIZE, color='tab:green', label='Stored points', zorder=3)

    def draw_query(self, ax, query_triangle, hits):
        corners = [(c.x, c.y) for c in query_triangle.corners()]
        ax.add_patch(Polygon(corners, closed=True, fill=False, edgecolor='tab:pink', linewidth=1.5, label='Query'))
        if hits:
            ax.scatter([p.x for p in hits], [p.y for p in hits],
                       s=C.PLOT_POINT_SIZE * 4, color='crimson', label='Query hits', zorder=4)

    def generate_and_save_tree_plot(self, tree, inside=None, outside=None, query=None, file_path=C.TREE_PLOT_FILE_PATH, show=False):
        """
        Uses matplotlib to draw the subdivided tree over the sampled points.
        inside/outside are optional (n, 2) arrays of classified samples;
        query is an optional (triangle, hits) pair.
        """
        log.log(f"[GraphingManager] Generating tree plot for {tree.size():,} nodes...")

        fig, ax = plt.subplots(figsize=C.PLOT_FIGURE_SIZE)

        if outside is not None and len(outside) > 0:
            ax.scatter(outside[:, 0], outside[:, 1], s=C.PLOT_POINT_SIZE, color='lightgray', label='Outside')
        if inside is not None and len(inside) > 0:
            ax.scatter(inside[:, 0], inside[:, 1], s=C.PLOT_POINT_SIZE * 2, facecolors='none',
                       edgecolors='tab:orange', linewidths=0.5, label='Inside')

        self.draw_tree(ax, tree)
        if query is not None:
            self.draw_query(ax, *query)

        ax.set_aspect('equal')
        ax.autoscale_view()
        ax.set_title(f'BaryTree: {tree.count_points():,} points, {tree.size():,} nodes, depth {tree.max_depth()}')
        if ax.get_legend_handles_labels()[0]:
            ax.legend(loc='upper right')

        fig.tight_layout()

        try:
            fig.savefig(file_path, dpi=C.PLOT_DPI)
            log.log(f"[GraphingManager] Tree plot saved to {file_path}")
        except Exception as e:
            log.log(f"[GraphingManager] ERROR: Could not save tree plot. Reason: {e}")

        if not show:
            plt.close(fig)
        return fig

    def generate_and_save_growth_graph(self, file_path=C.GROWTH_PLOT_FILE_PATH, show=False):
        """
        Uses matplotlib to plot node count and maximum depth against insertion attempts.
        """
        log.log(f"[GraphingManager] Generating growth plot with {len(self.data['attempts'])} data points...")

        fig, ax1 = plt.subplots(figsize=C.PLOT_GROWTH_FIGURE_SIZE)
        ax1.set_title('BaryTree Growth')
        ax1.set_xlabel('Insertion Attempts')
        ax1.grid(True, which='both', linestyle='--', linewidth=0.5)

        # --- Node and point counts on the left axis ---
        ax1.set_ylabel('Count', color='tab:blue')
        line1, = ax1.plot(self.data['attempts'], self.data['nodes'], color='tab:blue', label='Nodes')
        line2, = ax1.plot(self.data['attempts'], self.data['points'], color='tab:green', label='Stored points')
        ax1.tick_params(axis='y', labelcolor='tab:blue')

        # --- Depth on the right axis ---
        ax2 = ax1.twinx()
        ax2.set_ylabel('Max Depth', color='tab:red')
        line3, = ax2.plot(self.data['attempts'], self.data['max_depth'], color='tab:red', label='Max depth')
        ax2.tick_params(axis='y', labelcolor='tab:red')

        ax1.legend(handles=[line1, line2, line3], loc='upper left')

        fig.tight_layout()

        try:
            fig.savefig(file_path)
            log.log(f"[GraphingManager] Growth graph saved to {file_path}")
        except Exception as e:
            log.log(f"[GraphingManager] ERROR: Could not save growth graph. Reason: {e}")

        if not show:
            plt.close(fig)
        return fig

    def generate_and_save_graphs(self, tree, inside=None, outside=None, query=None,
                                 tree_path=C.TREE_PLOT_FILE_PATH, growth_path=C.GROWTH_PLOT_FILE_PATH, show=False):
        """
        Generates and saves the tree plot, plus the growth graph if any data was recorded.
        """
        self.generate_and_save_tree_plot(tree, inside, outside, query, file_path=tree_path, show=show)
        if self.has_data():
            self.generate_and_save_growth_graph(file_path=growth_path, show=show)
        else:
            log.log("[GraphingManager] No growth data collected, skipping growth graph.")

        if show:
            plt.show()
