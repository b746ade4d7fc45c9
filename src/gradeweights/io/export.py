"""Export the weight structure of a gradebook as JSON or YAML.

Both formats contain the same document: the gradebook and course ids, and the
tree of categories and items with their specified weights. Calculated weights
are included when a :class:`gradeweights.GradebookSetupForUI` is exported.

"""

import json
import pathlib as _pathlib
from typing import Union

import yaml

from ..core import GradebookSetup, GradebookSetupForUI


Setup = Union[GradebookSetup, GradebookSetupForUI]


def to_json(setup: Setup, indent: int = 2) -> str:
    """Serialize a gradebook setup as a JSON string."""
    return json.dumps(setup.to_dict(), indent=indent, ensure_ascii=False)


def to_yaml(setup: Setup) -> str:
    """Serialize a gradebook setup as a YAML string.

    Keys are kept in their natural order rather than sorted.

    """
    return yaml.safe_dump(
        setup.to_dict(), sort_keys=False, allow_unicode=True, indent=2
    )


def write(path: Union[str, _pathlib.Path], setup: Setup):
    """Writes a gradebook setup to disk.

    Parameters
    ----------
    path : pathlib.Path or str
        The path where the setup will be written. The format is chosen from
        the suffix: ``.json``, or ``.yaml``/``.yml``.
    setup : GradebookSetup or GradebookSetupForUI
        The setup to write.

    Raises
    ------
    ValueError
        If the suffix is not recognized.

    """
    path = _pathlib.Path(path)
    suffix = path.suffix.lower()

    if suffix == ".json":
        text = to_json(setup)
    elif suffix in {".yaml", ".yml"}:
        text = to_yaml(setup)
    else:
        raise ValueError(f'Unknown export format "{path.suffix}".')

    with path.open("w", encoding="utf-8") as fileobj:
        fileobj.write(text)
