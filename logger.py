# logger.py

# This will hold a reference to the tree being built, if any.
_tree = None

def set_tree(tree):
    """Sets the tree whose node count prefixes every log line."""
    global _tree
    _tree = tree

def log(message):
    """Prints a message with the attached tree's node count if available."""
    if _tree is not None:
        # size() walks the whole tree; fine for a log line, never in a hot loop.
        print(f"[Nodes {_tree.size():05d}] {message}")
    else:
        # For messages logged before a tree exists.
        print(f"[Setup] {message}")
