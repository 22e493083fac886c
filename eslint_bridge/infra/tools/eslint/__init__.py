from .base import EngineCapability, NodeEngine, NodeEngineAdapter

__all__ = ["EngineCapability", "NodeEngine", "NodeEngineAdapter"]
