from dataclasses import dataclass, asdict
from typing import Dict

METRICS_FORMAT = "{{VAR:{variables}, WHILE:{whiles}, IF:{ifs}, ENUM_VALUES:{enum_values}, OP:{operators}}}"


@dataclass
class Metrics:
    """Counters filled during one analysis run."""
    variables: int = 0
    whiles: int = 0
    ifs: int = 0
    enum_values: int = 0
    operators: int = 0

    def format(self) -> str:
        return METRICS_FORMAT.format(**asdict(self))

    def as_dict(self) -> Dict[str, int]:
        return {
            "VAR": self.variables,
            "WHILE": self.whiles,
            "IF": self.ifs,
            "ENUM_VALUES": self.enum_values,
            "OP": self.operators,
        }

    def __str__(self):
        return self.format()
