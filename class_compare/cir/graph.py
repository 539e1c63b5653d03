import networkx as nx # type: ignore
from typing import Any, Dict, Sequence

from class_compare.cir.model import ClassDecl


class ClassGraph:
    """
    Multi-graph view of one parsed class set.
    Nodes: Class, Field, Method, Parameter
    Edges: HAS_FIELD, HAS_METHOD, PARAM_OF, INHERITS
    INHERITS is only drawn when the superclass is part of the same set.
    Positions in node ids keep overloads and repeated names apart.
    """
    def __init__(self, g: nx.MultiDiGraph) -> None:
        self.g = g

    @classmethod
    def from_classes(cls, classes: Sequence[ClassDecl]) -> "ClassGraph":
        g = nx.MultiDiGraph()
        seen: Dict[str, ClassDecl] = {}

        for decl in classes:
            if decl.name in seen:
                continue
            seen[decl.name] = decl
            class_id = f"class:{decl.name}"
            g.add_node(class_id, kind="Class", name=decl.name, extends=decl.extends)

            for pos, attr in enumerate(decl.attributes):
                field_id = f"field:{decl.name}:{pos}:{attr.name}"
                g.add_node(field_id, kind="Field", name=attr.name,
                           modifier=attr.modifier, type_name=attr.type_name)
                g.add_edge(class_id, field_id, etype="HAS_FIELD")

            for pos, method in enumerate(decl.methods):
                method_id = f"method:{decl.name}:{pos}:{method.name}"
                g.add_node(method_id, kind="Method", name=method.name, modifier=method.modifier,
                           return_type=method.return_type, signature=method.signature().key)
                g.add_edge(class_id, method_id, etype="HAS_METHOD")

                for idx, p in enumerate(method.parameters):
                    p_id = f"param:{decl.name}:{pos}:{method.name}:{idx}:{p.name}"
                    g.add_node(p_id, kind="Parameter", name=p.name, type_name=p.type_name)
                    g.add_edge(p_id, method_id, etype="PARAM_OF")

        for name, decl in seen.items():
            if decl.extends in seen and decl.extends != name:
                g.add_edge(f"class:{name}", f"class:{decl.extends}", etype="INHERITS")

        return cls(g)

    def to_debug_json(self) -> Dict[str, Any]:
        """Nodes as {id, kind, attrs}, edges as {src, dst, type}."""
        return {
            "nodes": [
                {"id": nid, "kind": data["kind"], "attrs": {k: v for k, v in data.items() if k != "kind"}}
                for nid, data in self.g.nodes(data=True)
            ],
            "edges": [
                {"src": src, "dst": dst, "type": data["etype"]}
                for src, dst, data in self.g.edges(data=True)
            ],
        }
