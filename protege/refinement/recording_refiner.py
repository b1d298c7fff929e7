"""
Recording Refiner

Orchestrates goal deduction, backward tracing and noise pruning to transform a
raw teaching session into a refined, replayable script.
"""

from typing import List, Optional, Sequence

from protege.config import ProtegeConfig, get_config
from protege.recording.schemas import RecordedAction, RefinementReport, TerminalState
from protege.refinement.goal_deduction import deduce_goal
from protege.refinement.backward_tracing import trace_backward
from protege.refinement.noise_pruning import prune_noise
from protege.refinement.task_describer import describe_task, summarize_actions


class RecordingRefiner:
    """
    Refines raw action logs into minimal, goal-directed scripts

    Flow:
    1. Goal deduction: what did the session end with?
    2. Backward tracing: which actions produced that end state?
    3. Noise pruning: drop everything else, clean kept input values
    """

    def __init__(self, config: Optional[ProtegeConfig] = None, verbose: bool = True):
        """
        Initialize refiner

        Args:
            config: Thresholds (defaults to the environment configuration)
            verbose: Print progress for each stage
        """
        self.config = config or get_config()
        self.verbose = verbose

    def refine(self, raw_log: Sequence[RecordedAction]) -> List[RecordedAction]:
        """
        Refine a raw log

        Args:
            raw_log: Recorded actions in capture order

        Returns:
            Refined script (empty when nothing was learned)
        """
        return self.refine_with_report(raw_log).refined_script

    def refine_with_report(self, raw_log: Sequence[RecordedAction]) -> RefinementReport:
        """
        Refine a raw log and report what was deduced and removed

        Args:
            raw_log: Recorded actions in capture order

        Returns:
            RefinementReport with counts, goal and refined script
        """
        raw_log = list(raw_log)

        if not raw_log:
            self._log("[Refiner] Empty recording, nothing to learn")
            return RefinementReport(
                raw_count=0,
                refined_count=0,
                goal=TerminalState(),
                refined_script=[],
                description=describe_task([])
            )

        self._log(f"[Refiner] Refining {len(raw_log)} raw actions...")

        # Module 1: Deduce the goal from the final state
        goal = deduce_goal(raw_log, self.config)
        self._log(f"[Refiner] Goal: {len(goal.completed_targets)} completed tasks, "
                  f"{len(goal.field_values)} field values")

        # Module 2: Trace backward to find causally necessary actions
        keep_list = trace_backward(raw_log, goal, self.config)
        self._log(f"[Refiner] Traced {len(keep_list)} necessary actions")

        # Module 3: Prune all noise and mistakes
        refined_script = prune_noise(raw_log, keep_list, self.config)
        self._log(f"[Refiner] ✓ Refined {len(raw_log)} → {len(refined_script)} actions")

        if refined_script:
            self._log(summarize_actions(refined_script))
        else:
            self._log("[Refiner] Warning: No meaningful actions survived refinement")

        return RefinementReport(
            raw_count=len(raw_log),
            refined_count=len(refined_script),
            goal=goal,
            refined_script=refined_script,
            description=describe_task(refined_script)
        )

    def _log(self, message: str) -> None:
        if self.verbose:
            print(message)


def process_recording(
    raw_log: Sequence[RecordedAction],
    config: Optional[ProtegeConfig] = None
) -> List[RecordedAction]:
    """
    Transform a raw recording into its refined script

    Args:
        raw_log: Recorded actions in capture order
        config: Thresholds (defaults to the environment configuration)

    Returns:
        Refined script, [] for an empty or fully noisy log
    """
    if not raw_log:
        return []

    return RecordingRefiner(config=config, verbose=False).refine(raw_log)
