"""Tests for the status model and the status tracker."""

import pytest

from graphwalk import Edge, EdgeType, NodeInfo, NodeStatus, StatusTransitionError
from graphwalk._status import SearchInfo


class TestNodeStatus:
    def test_values(self) -> None:
        assert NodeStatus.NEW.value == "new"
        assert NodeStatus.DISCOVERED.value == "discovered"
        assert NodeStatus.PROCESSED.value == "processed"

    def test_members_are_documented(self) -> None:
        assert NodeStatus.NEW.__doc__ == "The node has not been discovered yet."
        assert "depth-first" in (NodeStatus.PROCESSED.__doc__ or "")
        assert EdgeType.BACK.__doc__ == "Edge to a node that is still being visited. Implies a cycle."

    def test_rank_follows_progression(self) -> None:
        assert NodeStatus.NEW.rank < NodeStatus.DISCOVERED.rank < NodeStatus.PROCESSED.rank

    def test_is_str(self) -> None:
        assert isinstance(NodeStatus.NEW, str)
        assert f"{EdgeType.CROSS_OR_FORWARD}" == "cross_or_forward"


class TestEdge:
    """Tests for edge classification."""

    @pytest.mark.parametrize(
        ("target_status", "expected"),
        [
            (NodeStatus.NEW, EdgeType.TREE),
            (NodeStatus.DISCOVERED, EdgeType.BACK),
            (NodeStatus.PROCESSED, EdgeType.CROSS_OR_FORWARD),
        ],
    )
    def test_type_from_target_status(self, target_status: NodeStatus, expected: EdgeType) -> None:
        edge = Edge(NodeInfo("a", NodeStatus.DISCOVERED), NodeInfo("b", target_status))
        assert edge.type() is expected

    def test_source_and_target(self) -> None:
        edge = Edge(NodeInfo("a", NodeStatus.DISCOVERED), NodeInfo("b", NodeStatus.NEW))
        assert edge.source == "a"
        assert edge.target == "b"

    def test_snapshots_are_immutable(self) -> None:
        info = NodeInfo("a", NodeStatus.NEW)
        with pytest.raises(AttributeError):
            info.status = NodeStatus.PROCESSED  # type: ignore[misc]


class TestSearchInfo:
    """Tests for the per-traversal status map."""

    def test_unknown_node_is_new(self) -> None:
        info: SearchInfo[str] = SearchInfo()
        assert info.status("a") is NodeStatus.NEW
        assert info.node_info("a") == NodeInfo("a", NodeStatus.NEW)
        assert len(info) == 0

    def test_set_and_get(self) -> None:
        info: SearchInfo[str] = SearchInfo()
        info.set("a", NodeStatus.DISCOVERED)
        assert info.status("a") is NodeStatus.DISCOVERED
        info.set("a", NodeStatus.PROCESSED)
        assert info.node_info("a") == NodeInfo("a", NodeStatus.PROCESSED)
        assert len(info) == 1

    def test_lenient_tracker_accepts_repeated_status(self) -> None:
        info: SearchInfo[str] = SearchInfo()
        info.set("a", NodeStatus.DISCOVERED)
        info.set("a", NodeStatus.DISCOVERED)
        assert info.status("a") is NodeStatus.DISCOVERED

    def test_lenient_tracker_counts_nodes_set_to_new(self) -> None:
        info: SearchInfo[str] = SearchInfo()
        info.set("a", NodeStatus.NEW)
        assert info.status("a") is NodeStatus.NEW
        assert len(info) == 1

    def test_strict_tracker_accepts_forward_moves(self) -> None:
        info: SearchInfo[str] = SearchInfo(strict=True)
        info.set("a", NodeStatus.DISCOVERED)
        info.set("a", NodeStatus.PROCESSED)
        assert info.status("a") is NodeStatus.PROCESSED

    def test_strict_tracker_rejects_repeated_status(self) -> None:
        info: SearchInfo[str] = SearchInfo(strict=True)
        info.set("a", NodeStatus.DISCOVERED)
        with pytest.raises(StatusTransitionError, match="discovered -> discovered") as exc_info:
            info.set("a", NodeStatus.DISCOVERED)
        assert exc_info.value.node == "a"
        assert exc_info.value.current is NodeStatus.DISCOVERED

    def test_strict_tracker_rejects_regression(self) -> None:
        info: SearchInfo[str] = SearchInfo(strict=True)
        info.set("a", NodeStatus.PROCESSED)
        with pytest.raises(StatusTransitionError):
            info.set("a", NodeStatus.DISCOVERED)

    def test_strict_tracker_rejects_setting_new(self) -> None:
        info: SearchInfo[str] = SearchInfo(strict=True)
        with pytest.raises(AssertionError):
            info.set("a", NodeStatus.NEW)
