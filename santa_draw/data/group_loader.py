# santa_draw/data/group_loader.py
from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Union

import pandas as pd

from ..config import (
    MAX_ATTEMPTS,
    PARTICIPANT_NAME_COLUMN,
    EXCLUSION_FROM_COLUMN,
    EXCLUSION_TO_COLUMN,
    EXCLUSION_KIND_COLUMN,
    EXCLUSION_KIND_PAIR,
    EXCLUSION_KIND_DIRECTED,
    ASSIGNMENT_GIVER_COLUMN,
    ASSIGNMENT_RECIPIENT_COLUMN,
)
from ..errors import GroupFileError
from ..group import Group
from ..models import Assignment


def _read_csv(path: Union[str, Path], required_cols: List[str]) -> pd.DataFrame:
    """
    Read a CSV as plain strings and check its columns.

    :raises GroupFileError: If file not found, read error, or columns missing.
    """
    try:
        # keep_default_na=False so somebody called "NA" stays a name
        df = pd.read_csv(path, dtype=str, keep_default_na=False)
    except FileNotFoundError:
        raise GroupFileError(f"CSV file not found at: {path}")
    except Exception as e:
        raise GroupFileError(f"Error reading CSV file {path}: {e}")

    df.columns = [str(c).strip() for c in df.columns]
    missing_cols = [col for col in required_cols if col not in df.columns]
    if missing_cols:
        raise GroupFileError(
            f"Missing required columns in {path}: {', '.join(missing_cols)}"
        )

    for col in required_cols:
        df[col] = df[col].str.strip()
    return df


def load_group_from_csv(
    participants_path: Union[str, Path],
    exclusions_path: Optional[Union[str, Path]] = None,
    max_attempts: int = MAX_ATTEMPTS,
) -> Group:
    """
    Build a Group from CSV files of shape:

        participants.csv        exclusions.csv
        name                    from,to,kind
        Sheldon                 Sheldon,Amy,pair
        Amy                     Penny,Rajesh,directed
        ...                     ...

    Blank names are skipped. Duplicate or unknown names raise the Group's
    own errors (DuplicateParticipant, UnknownParticipant, InvalidConstraint).
    """
    group = Group(max_attempts=max_attempts)

    people = _read_csv(participants_path, [PARTICIPANT_NAME_COLUMN])
    for name in people[PARTICIPANT_NAME_COLUMN]:
        if name:
            group.add(name)

    if exclusions_path is None:
        return group

    exclusions = _read_csv(
        exclusions_path,
        [EXCLUSION_FROM_COLUMN, EXCLUSION_TO_COLUMN, EXCLUSION_KIND_COLUMN],
    )
    rows = exclusions[[EXCLUSION_FROM_COLUMN, EXCLUSION_TO_COLUMN, EXCLUSION_KIND_COLUMN]]
    # plain tuples: "from" is not a valid namedtuple field
    for row_no, (giver, recipient, kind) in enumerate(
        rows.itertuples(index=False, name=None), start=2
    ):
        kind = kind.lower()
        if not giver and not recipient:
            continue

        if kind == EXCLUSION_KIND_PAIR:
            group.exclude_pair(giver, recipient)
        elif kind == EXCLUSION_KIND_DIRECTED:
            group.exclude(giver, recipient)
        else:
            raise GroupFileError(
                f"Unknown exclusion kind \"{kind}\" on line {row_no} of {exclusions_path}. "
                f"Use \"{EXCLUSION_KIND_PAIR}\" or \"{EXCLUSION_KIND_DIRECTED}\"."
            )

    return group


def assignment_to_frame(assignment: Assignment) -> pd.DataFrame:
    return pd.DataFrame(
        list(assignment.pairs),
        columns=[ASSIGNMENT_GIVER_COLUMN, ASSIGNMENT_RECIPIENT_COLUMN],
    )


def save_assignment_csv(assignment: Assignment, path: Union[str, Path]) -> None:
    """
    Saves the assignment as giver,recipient rows.

    :raises GroupFileError: If permission is denied or write fails.
    """
    try:
        assignment_to_frame(assignment).to_csv(path, index=False)
    except PermissionError:
        raise GroupFileError(f"Permission denied. Cannot write to {path}.")
    except OSError as e:
        raise GroupFileError(f"Error writing assignment CSV {path}: {e}")
