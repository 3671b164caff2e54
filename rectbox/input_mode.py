"""Base for modes that resolve SOCD on their inputs."""

from __future__ import annotations

from collections.abc import Iterable

from rectbox import socd
from rectbox.socd import SocdPair, SocdState, SocdType
from rectbox.state import InputState


class InputMode:
    """Holds SOCD pairs and applies their resolution to an InputState."""

    def __init__(self, socd_pairs: Iterable[SocdPair] = ()) -> None:
        self.socd_pairs: tuple[SocdPair, ...] = tuple(socd_pairs)
        self._socd_states = [SocdState() for _ in self.socd_pairs]

    def handle_socd(self, inputs: InputState) -> None:
        """Resolve every SOCD pair in place, in order."""
        for pair, state in zip(self.socd_pairs, self._socd_states):
            dir1 = getattr(inputs, pair.input_dir1)
            dir2 = getattr(inputs, pair.input_dir2)
            kind = pair.socd_type
            if kind is SocdType.NEUTRAL:
                dir1, dir2 = socd.neutral(dir1, dir2)
            elif kind is SocdType.SECOND_INPUT_PRIORITY:
                dir1, dir2 = socd.second_input_priority(dir1, dir2, state)
            elif kind is SocdType.SECOND_INPUT_PRIORITY_NO_REACTIVATION:
                dir1, dir2 = socd.second_input_priority_no_reactivation(dir1, dir2, state)
            elif kind is SocdType.DIR1_PRIORITY:
                dir1, dir2 = socd.dir1_priority(dir1, dir2)
            elif kind is SocdType.DIR2_PRIORITY:
                dir2, dir1 = socd.dir1_priority(dir2, dir1)
            else:
                continue
            setattr(inputs, pair.input_dir1, dir1)
            setattr(inputs, pair.input_dir2, dir2)