"""Hive repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from hivemind.domain.model import Hive
from hivemind.domain.value import HiveId, HiveName, RollupDelta


class HiveRepository(ABC):
    """Repository for Hive aggregate.

    Defines the contract for hive persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(
        self, hive_id: HiveId, for_update: bool = False
    ) -> Optional[Hive]:
        """Find a hive by ID.

        Args:
            hive_id: The hive's unique identifier
            for_update: Lock the row until the unit of work ends

        Returns:
            The hive if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_name(self, name: HiveName) -> Optional[Hive]:
        """Find a hive by its unique name.

        Args:
            name: Hive name

        Returns:
            The hive if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Hive]:
        """Find all hives ordered by creation.

        Returns:
            List of hives
        """
        pass

    @abstractmethod
    async def save(self, hive: Hive) -> Hive:
        """Save a hive (create or update).

        Rollup columns of an existing hive are not overwritten; they only
        change through ``adjust_rollups``.

        Args:
            hive: The hive to save

        Returns:
            The saved hive
        """
        pass

    @abstractmethod
    async def adjust_rollups(self, hive_id: HiveId, delta: RollupDelta) -> Optional[Hive]:
        """Atomically add a delta to the hive's rollup counters.

        Args:
            hive_id: Hive ID
            delta: Signed change for each rollup

        Returns:
            The updated hive, None if it doesn't exist
        """
        pass
