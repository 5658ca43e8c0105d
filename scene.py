# scene.py

import numpy as np
import constants as C
from barytree import BaryTree, Triangle
from camera import Camera
from geometry import InvalidGeometryError, Point
from graphing_manager import GraphingManager
from sampling import classify, insert_samples, sample_square
from ui import draw_loading_screen
import logger as log

class Scene:
    """Everything the viewer shows: the tree, the sampled points and the current query."""
    def __init__(self):
        log.log("Creating a new Scene...")
        self.camera = Camera()
        self.tree = BaryTree.from_corners(*C.ROOT_TRIANGLE_CORNERS)
        self.graphing_manager = GraphingManager()
        self.inside = np.empty((0, 2))
        self.outside = np.empty((0, 2))

        self.insert_attempts = 0
        self.inserted_points = 0
        self.batches_added = 0
        self.last_stats_log_attempts = 0

        # --- Query state: corners collected so far and the last completed query ---
        self.query_corners = []
        self.query_triangle = None
        self.query_hits = []

        self.draw_points = True
        log.log("Scene created. Tree is empty.")

    def populate(self, screen=None, font=None, count=C.SAMPLE_POINT_COUNT, seed=C.SAMPLE_RANDOM_SEED):
        """
        Samples random points in a square, keeps the ones inside the root triangle
        and inserts them, drawing a progress bar if a screen is given.
        """
        log.log(f"Populating the tree with {count:,} sampled points...")
        samples = sample_square(count, C.SAMPLE_SQUARE_HALF_WIDTH, seed)
        self._insert_classified(samples, screen, font)
        log.log("Tree population complete.")

    def add_random_batch(self):
        self.batches_added += 1
        seed = C.SAMPLE_RANDOM_SEED + self.batches_added
        samples = sample_square(C.VIEWER_BATCH_POINT_COUNT, C.SAMPLE_SQUARE_HALF_WIDTH, seed)
        self._insert_classified(samples)

    def _insert_classified(self, samples, screen=None, font=None):
        inside, outside = classify(samples, self.tree.region)
        self.inside = np.concatenate([self.inside, inside])
        self.outside = np.concatenate([self.outside, outside])

        base_attempts = self.insert_attempts

        def on_progress(done, total, accepted):
            self.graphing_manager.record(self.tree, base_attempts + done)
            if screen is not None:
                draw_loading_screen(screen, font, done, total, accepted)

        accepted = insert_samples(self.tree, inside, on_progress)
        self.insert_attempts += len(inside)
        self.inserted_points += accepted
        self._maybe_print_tree_statistics()

    def add_point(self, world_pos):
        """Inserts a single point. Returns whether the tree stored it."""
        point = Point.of(world_pos)
        self.insert_attempts += 1
        accepted = self.tree.insert(point)
        if accepted:
            self.inserted_points += 1
            self.inside = np.concatenate([self.inside, [[point.x, point.y]]])
            log.log(f"Inserted point ({point.x:.4f}, {point.y:.4f}).")
        else:
            log.log(f"Point ({point.x:.4f}, {point.y:.4f}) was not stored.")
        self.graphing_manager.record(self.tree, self.insert_attempts)
        self._maybe_print_tree_statistics()
        return accepted

    def add_query_corner(self, world_pos):
        """
        Collects query corners; the third one runs the query.
        Returns the hits once a query ran, otherwise None.
        """
        self.query_corners.append(Point.of(world_pos))
        if len(self.query_corners) < 3:
            return None

        corners, self.query_corners = self.query_corners, []
        try:
            triangle = Triangle.from_corners(*corners)
        except InvalidGeometryError as e:
            log.log(f"WARNING: Ignoring query triangle. Reason: {e}")
            return None

        self.query_triangle = triangle
        self.query_hits = self.tree.query(triangle)
        log.log(f"Query found {len(self.query_hits):,} points.")
        return self.query_hits

    def clear_query(self):
        self.query_corners = []
        self.query_triangle = None
        self.query_hits = []

    def toggle_point_drawing(self):
        self.draw_points = not self.draw_points

    def handle_click(self, screen_pos, button):
        """Left click inserts a point, right click adds a query corner."""
        world_pos = self.camera.screen_to_world(screen_pos[0], screen_pos[1])
        if button == 1:
            self.add_point(world_pos)
        elif button == 3:
            self.add_query_corner(world_pos)

    def save_graphs(self):
        query = (self.query_triangle, self.query_hits) if self.query_triangle is not None else None
        self.graphing_manager.generate_and_save_graphs(self.tree, self.inside, self.outside, query)

    def hud_lines(self):
        lines = [
            f"Points: {self.tree.count_points():,} | Nodes: {self.tree.size():,} | Depth: {self.tree.max_depth()}",
        ]
        if self.query_triangle is not None:
            lines.append(f"Query hits: {len(self.query_hits):,}")
        if self.query_corners:
            lines.append(f"Query corners: {len(self.query_corners)}/3")
        return lines

    def draw(self, screen):
        for node in self.tree.walk():
            color = C.COLOR_ROOT_EDGE if node.is_root else C.COLOR_NODE_EDGE
            self.camera.draw_triangle(screen, node.region.corners(), color)

        if self.draw_points:
            for x, y in self.outside:
                self.camera.draw_point(screen, Point(x, y), C.COLOR_POINT_OUTSIDE, C.POINT_RADIUS_PIXELS)
            for point in self.tree.points():
                self.camera.draw_point(screen, point, C.COLOR_POINT, C.POINT_RADIUS_PIXELS)

        if self.query_triangle is not None:
            self.camera.draw_triangle(screen, self.query_triangle.corners(), C.COLOR_QUERY_EDGE, 2)
            for point in self.query_hits:
                self.camera.draw_point(screen, point, C.COLOR_QUERY_HIT, C.QUERY_HIT_RADIUS_PIXELS)

        for corner in self.query_corners:
            self.camera.draw_point(screen, corner, C.COLOR_QUERY_CORNER, C.QUERY_CORNER_RADIUS_PIXELS)

    def _maybe_print_tree_statistics(self):
        if self.insert_attempts - self.last_stats_log_attempts >= C.STATS_LOG_INTERVAL_POINTS:
            self._print_tree_statistics()
            self.last_stats_log_attempts = self.insert_attempts

    def _print_tree_statistics(self):
        """Prints a formatted summary of the tree's shape."""
        log.log("\n--- Tree Statistics ---")
        log.log(f"  Insert attempts: {self.insert_attempts:,}")
        log.log(f"  Stored points: {self.tree.count_points():,}")
        log.log(f"  Nodes: {self.tree.size():,}")
        log.log(f"  Max depth: {self.tree.max_depth()}")
