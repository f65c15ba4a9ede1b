# model.py
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, List, Mapping, Tuple

from .errors import GroupNotFound


CD_COMMAND = "cd"


@dataclass(frozen=True)
class Step:
    """A single command (step) inside a group."""
    executable: str
    arguments: Tuple[str, ...] = ()

    @property
    def is_cd(self) -> bool:
        return self.executable == CD_COMMAND

    @property
    def argv(self) -> List[str]:
        return [self.executable, *self.arguments]

    def to_dict(self) -> Dict[str, object]:
        return {"command": self.executable, "args": list(self.arguments)}


Group = Mapping[str, Step]


@dataclass(frozen=True)
class Catalog:
    """
    Parsed command file: group name -> (step name -> Step).

    Step names carry no storage order; `ordered_steps` is the one place
    that decides execution order.
    """
    groups: Mapping[str, Group] = field(default_factory=dict)

    def __post_init__(self) -> None:
        frozen = {
            name: MappingProxyType(dict(steps))
            for name, steps in self.groups.items()
        }
        object.__setattr__(self, "groups", MappingProxyType(frozen))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Catalog):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __hash__(self) -> int:
        return hash(tuple(
            (g, tuple(sorted(steps.items())))
            for g, steps in sorted(self.groups.items())
        ))

    def group_names(self) -> List[str]:
        return sorted(self.groups)

    def has_group(self, name: str) -> bool:
        return name in self.groups

    def ordered_steps(self, name: str) -> List[Tuple[str, Step]]:
        """Steps of `name` sorted by step name (code point order)."""
        if name not in self.groups:
            raise GroupNotFound(group=name, available=self.group_names())
        return sorted(self.groups[name].items(), key=lambda item: item[0])

    def to_dict(self) -> Dict[str, Dict[str, Dict[str, object]]]:
        return {
            group: {step_name: step.to_dict() for step_name, step in steps.items()}
            for group, steps in self.groups.items()
        }
