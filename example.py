#example.py

import constants as C
from barytree import BaryTree
from graphing_manager import GraphingManager
from sampling import classify, insert_samples, sample_square
import logger

def run_example(count=C.SAMPLE_POINT_COUNT, seed=C.SAMPLE_RANDOM_SEED,
                tree_path=C.TREE_PLOT_FILE_PATH, growth_path=C.GROWTH_PLOT_FILE_PATH):
    """
    Samples random points in a square, inserts the ones inside the root
    triangle and saves the resulting plots. Returns the tree.
    """
    tree = BaryTree.from_corners(*C.ROOT_TRIANGLE_CORNERS)
    logger.set_tree(tree)
    graphing_manager = GraphingManager()

    samples = sample_square(count, C.SAMPLE_SQUARE_HALF_WIDTH, seed)
    inside, outside = classify(samples, tree.region)
    logger.log(f"Classified {len(samples):,} samples: {len(inside):,} inside, {len(outside):,} outside.")

    # Insert only points inside the triangle, sampling the growth after every one.
    accepted = insert_samples(tree, inside, lambda done, total, stored: graphing_manager.record(tree, done), interval=1)
    logger.log(f"Inserted {accepted:,} of {len(inside):,} points. Max depth: {tree.max_depth()}")

    graphing_manager.generate_and_save_graphs(tree, inside, outside, tree_path=tree_path, growth_path=growth_path)
    logger.set_tree(None)
    return tree

if __name__ == '__main__':
    run_example()
