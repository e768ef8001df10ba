from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from gitviz.commits.models import CommitType


@dataclass(frozen=True, slots=True)
class Palette:
    background: str
    text: str
    border: str
    type_colors: Mapping[CommitType, str]

    def color_for(self, commit_type: str) -> str:
        try:
            return self.type_colors[CommitType(commit_type)]
        except (KeyError, ValueError):
            return self.type_colors[CommitType.OTHER]


# style, build, ci and revert have no dedicated color and render as "other".
LIGHT_PALETTE = Palette(
    background="#ffffff",
    text="#000000",
    border="#e0e0e0",
    type_colors=MappingProxyType(
        {
            CommitType.FEAT: "#81C784",
            CommitType.FIX: "#E57373",
            CommitType.DOCS: "#64B5F6",
            CommitType.REFACTOR: "#FFB74D",
            CommitType.PERF: "#BA68C8",
            CommitType.TEST: "#FFF176",
            CommitType.CHORE: "#A1887F",
            CommitType.OTHER: "#BDBDBD",
        }
    ),
)

DARK_PALETTE = Palette(
    background="#1a1a1a",
    text="#ffffff",
    border="#333333",
    type_colors=MappingProxyType(
        {
            CommitType.FEAT: "#4CAF50",
            CommitType.FIX: "#F44336",
            CommitType.DOCS: "#2196F3",
            CommitType.REFACTOR: "#FF9800",
            CommitType.PERF: "#9C27B0",
            CommitType.TEST: "#FFEB3B",
            CommitType.CHORE: "#795548",
            CommitType.OTHER: "#9E9E9E",
        }
    ),
)


def palette_for(dark_mode: bool) -> Palette:
    return DARK_PALETTE if dark_mode else LIGHT_PALETTE
