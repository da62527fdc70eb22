import dataclasses
import json
from enum import Enum
from typing import IO, Any

import numpy as np


class JSONEncoder(json.JSONEncoder):
    def default(self, obj: Any) -> Any:
        if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
            return dataclasses.asdict(obj)
        if isinstance(obj, Enum):
            return obj.name
        if isinstance(obj, np.integer):
            return int(obj)
        if isinstance(obj, np.floating):
            return float(obj)
        if isinstance(obj, np.ndarray):
            return obj.tolist()
        return super().default(obj)


def dump(obj: Any, file: IO[str], **kwargs):
    json.dump(obj, file, cls=JSONEncoder, **kwargs)


def dumps(obj: Any, **kwargs) -> str:
    return json.dumps(obj, cls=JSONEncoder, **kwargs)
