"""Batch file loading.

A batch file is YAML listing store operations to apply in order:

    operations:
      - action: deposit
        account: Alice
        amount: 100
      - action: withdraw
        account: Alice
        amount: 30
"""

from pathlib import Path
from typing import List, Literal, Tuple

import yaml
from pydantic import BaseModel, Field, ValidationError

from logger import get_logger
from models.operation import MAX_OPERATION_AMOUNT

logger = get_logger()


class BatchOperation(BaseModel):
    """Single entry of a batch file."""

    action: Literal["deposit", "withdraw"]
    account: str = Field(min_length=1)
    amount: int = Field(ge=0, le=MAX_OPERATION_AMOUNT)

    def to_tuple(self) -> Tuple[bool, str, int]:
        return (self.action == "deposit", self.account, self.amount)


class BatchFile(BaseModel):
    """Whole batch file."""

    operations: List[BatchOperation]


def parse_batch(text: str) -> List[Tuple[bool, str, int]]:
    """Parse batch YAML into (is_deposit, name, amount) tuples.

    Args:
        text: YAML document.

    Returns:
        Operations in file order, ready for AccountStore.apply_batch.

    Raises:
        ValueError: If the YAML is invalid or does not match the batch schema.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid batch YAML: {e}") from e

    if data is None:
        data = {"operations": []}

    try:
        batch = BatchFile.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid batch file: {e}") from e

    return [operation.to_tuple() for operation in batch.operations]


def load_batch(path: Path) -> List[Tuple[bool, str, int]]:
    """Load a batch file from disk.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the file is not a valid batch file.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Batch file not found: {path}")

    logger.info(f"Loading batch from {path}")

    with open(path, "r") as f:
        operations = parse_batch(f.read())

    logger.debug(f"Loaded {len(operations)} batch operations")
    return operations
