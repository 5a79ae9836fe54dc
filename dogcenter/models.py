"""
Design (models.py)
- Purpose: Define simple, typed data structures for domain entities (DogRecord).
- Inputs: Field values (int, str).
- Outputs: Dataclass instances.
- Side effects: None.
- Thread-safety: Frozen dataclasses; safe to share between the UI and monitor threads.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class DogRecord:
    """
    Design (DogRecord)
    - Purpose: Represents a single dog row of the dogs table.
    - Fields:
        id: Primary key assigned by SQLite on insert (never changes).
        name: Dog name (non-empty once validated).
        feeding_time: "HH:mm" string, stored in the feedingTime column.
    """
    id: int
    name: str
    feeding_time: str
