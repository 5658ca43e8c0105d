"""
Unit Tests for the log prefix.
"""

import logger


class TestLog:

    def test_log_without_tree_uses_setup_prefix(self, capsys):
        logger.log("hello")
        assert capsys.readouterr().out == "[Setup] hello\n"

    def test_log_with_tree_uses_node_count(self, tree, capsys):
        logger.set_tree(tree)
        tree.insert((0.0, 0.2))
        logger.log("hello")
        assert capsys.readouterr().out == "[Nodes 00005] hello\n"
