"""
Tile Node Executor Registry.

Maps node type names ("Tile Merge", "Overview Tile", ...) to the executor
functions in NodesLib, so a pipeline can run a node dictionary by its type.

Classes:
    NodeExecutorRegistry: Registry for node executors

Functions:
    get_default_registry: Get the global default registry (singleton)
    register_default_executors: Register all built-in tile node executors
    executor_wrapper: Decorator registering a custom executor
"""

from typing import Any, Callable, Dict, List, Optional
from functools import wraps
import logging

from TP_Libs.constants import (
    NODE_TYPE_COLOR_REPLACE,
    NODE_TYPE_COMBINE,
    NODE_TYPE_COVERAGE_RECT,
    NODE_TYPE_EDGE_CLEAN,
    NODE_TYPE_MERGE,
    NODE_TYPE_MERGE_N,
    NODE_TYPE_OVERVIEW,
)

logger = logging.getLogger(__name__)

# Executors take (node_dict, inputs) and return a tile, a Path or a Rectangle
ExecutorFunction = Callable[[Dict[str, Any], List[Any]], Any]


class NodeExecutorRegistry:
    """
    Registry for tile node executors.

    Example:
        >>> registry = NodeExecutorRegistry()
        >>> registry.register("Tile Merge", execute_merge_node)
        >>> merged = registry.execute_node({"type": "Tile Merge"}, [tile_a, tile_b])
    """

    def __init__(self):
        self._executors: Dict[str, ExecutorFunction] = {}

    def register(self, node_type: str, executor: ExecutorFunction) -> None:
        """
        Register a node executor.

        Raises:
            ValueError: If node_type is empty or executor is not callable
            RuntimeError: If node_type is already registered
        """
        node_type = str(node_type).strip()

        if not node_type:
            raise ValueError("node_type cannot be empty")

        if not callable(executor):
            raise ValueError(f"executor must be callable, got {type(executor)}")

        if node_type in self._executors:
            raise RuntimeError(f"Node type '{node_type}' is already registered")

        self._executors[node_type] = executor
        logger.debug(f"Registered executor for node type: {node_type}")

    def get_executor(self, node_type: str) -> ExecutorFunction:
        """
        Get the executor for a node type.

        Raises:
            KeyError: If node_type is not registered
        """
        node_type = str(node_type).strip()

        if node_type not in self._executors:
            available = ", ".join(self.list_node_types())
            raise KeyError(
                f"No executor registered for node type '{node_type}'. "
                f"Available types: {available}"
            )

        return self._executors[node_type]

    def has_executor(self, node_type: str) -> bool:
        return str(node_type).strip() in self._executors

    def execute(
        self,
        node_type: str,
        node_dict: Dict[str, Any],
        inputs: List[Any],
    ) -> Any:
        """
        Execute a node by looking up its executor.

        Raises:
            KeyError: If node_type is not registered
            Exception: Anything the executor raises is propagated unchanged
        """
        executor = self.get_executor(node_type)
        logger.debug(f"Executing node {node_dict.get('id', '?')} ({node_type})")
        return executor(node_dict, inputs)

    def execute_node(self, node_dict: Dict[str, Any], inputs: Optional[List[Any]] = None) -> Any:
        """
        Execute a node dictionary using its own "type" entry.

        Raises:
            KeyError: If the node has no "type" or the type is not registered
        """
        if "type" not in node_dict:
            raise KeyError(f"Node {node_dict.get('id', '?')} has no 'type'")
        return self.execute(node_dict["type"], node_dict, list(inputs or []))

    def list_node_types(self) -> List[str]:
        """Sorted list of all registered node type names."""
        return sorted(self._executors.keys())


# Global singleton registry
_default_registry: Optional[NodeExecutorRegistry] = None


def get_default_registry() -> NodeExecutorRegistry:
    """
    Get the global default registry (singleton).

    Creates the registry on first call and registers the built-in executors.
    """
    global _default_registry

    if _default_registry is None:
        _default_registry = NodeExecutorRegistry()
        register_default_executors(_default_registry)

    return _default_registry


def register_default_executors(registry: NodeExecutorRegistry) -> None:
    """
    Register the built-in tile node executors.

    This function registers:
    - Tile Combine, Tile Merge and Tile Merge N
    - Overview Tile
    - Edge Clean
    - Coverage Rect
    - Color Replace

    Args:
        registry: The registry to register executors with
    """
    from TP_Libs.NodesLib.tile_merge_node import (
        execute_combine_node,
        execute_merge_node,
        execute_merge_n_node,
    )
    from TP_Libs.NodesLib.overview_node import execute_overview_node
    from TP_Libs.NodesLib.edge_clean_node import execute_edge_clean_node
    from TP_Libs.NodesLib.coverage_node import execute_coverage_rect_node
    from TP_Libs.NodesLib.color_replace_node import execute_color_replace_node

    registry.register(NODE_TYPE_COMBINE, execute_combine_node)
    registry.register(NODE_TYPE_MERGE, execute_merge_node)
    registry.register(NODE_TYPE_MERGE_N, execute_merge_n_node)
    registry.register(NODE_TYPE_OVERVIEW, execute_overview_node)
    registry.register(NODE_TYPE_EDGE_CLEAN, execute_edge_clean_node)
    registry.register(NODE_TYPE_COVERAGE_RECT, execute_coverage_rect_node)
    registry.register(NODE_TYPE_COLOR_REPLACE, execute_color_replace_node)

    logger.info("Registered default tile node executors")


def executor_wrapper(
    node_type: str,
    registry: Optional[NodeExecutorRegistry] = None,
) -> Callable:
    """
    Decorator to register a custom executor, by default with the default registry.

    A node type that is already registered keeps its existing executor.

    Usage:
        >>> @executor_wrapper("Tile Blank Check")
        >>> def blank_check(node, inputs):
        ...     return is_blank_tile(inputs[0])
    """
    def decorator(func: ExecutorFunction) -> ExecutorFunction:
        target = registry if registry is not None else get_default_registry()

        if target.has_executor(node_type):
            logger.debug(f"Node type '{node_type}' already registered, skipping")
        else:
            target.register(node_type, func)

        @wraps(func)
        def wrapper(node: Dict[str, Any], inputs: List[Any]) -> Any:
            return func(node, inputs)

        return wrapper

    return decorator
