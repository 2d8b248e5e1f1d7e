import copy
import json
from pathlib import Path
from typing import Any, Dict, List


class TestDataLoader:
    __test__ = False

    _data: Dict[str, Any] = None

    @classmethod
    def load(cls) -> Dict[str, Any]:
        if cls._data is None:
            with open(Path(__file__).parent / "test_data.json") as f:
                cls._data = json.load(f)
        return cls._data

    @classmethod
    def get(cls, key: str) -> Any:
        return cls.load().get(key)

    @classmethod
    def account(cls, key: str) -> Dict[str, str]:
        """A registrable account (username, email, password), safe to mutate."""
        return copy.deepcopy(cls.get(key))

    @classmethod
    def rejected_passwords(cls) -> List[str]:
        return list(cls.get("rejected_passwords"))
