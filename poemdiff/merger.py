from typing import Iterable, List, Union
from .models import ClassifiedToken, Segment

Step = Union[ClassifiedToken, Segment]


def merge_segments(steps: Iterable[Step]) -> List[Segment]:
    """
    Collapses consecutive steps with the same classification into segments.

    Accepts aligner output or already merged segments; merging twice gives
    the same result as merging once. Empty runs are never emitted.
    """
    merged: List[Segment] = []
    run: List[Step] = []

    for step in steps:
        if not step.text:
            continue
        if run and run[-1].classification != step.classification:
            merged.append(_close(run))
            run = []
        run.append(step)

    if run:
        merged.append(_close(run))
    return merged


def _close(run: List[Step]) -> Segment:
    return Segment(
        text="".join(step.text for step in run),
        classification=run[0].classification,
        word_count=sum(step.word_count for step in run),
    )
