"""Career catalog service.

The catalog is read-only reference data shared by every submission. It keeps
insertion order, which the scoring engine relies on for tie-breaking.
"""

from typing import Dict, Iterable, Iterator, List, Optional

from lantern.data.career_catalog import DEFAULT_CAREERS
from lantern.schemas.career_schemas import CareerRecord
from lantern.schemas.profile_schemas import StudentProfile
from lantern.utils.constants import Sector
from lantern.utils.exceptions import ValidationError
from lantern.utils.logger import get_logger

logger = get_logger(__name__)


class CareerCatalog:
    """Queryable, immutable collection of career records."""

    def __init__(self, careers: Optional[Iterable[CareerRecord]] = None):
        """Initialize the catalog.

        Args:
            careers: Career records in display order; defaults to the built-in catalog

        Raises:
            ValidationError: If two records share an id
        """
        records = tuple(DEFAULT_CAREERS if careers is None else careers)

        by_id: Dict[str, CareerRecord] = {}
        duplicates = []
        for record in records:
            if record.id in by_id:
                duplicates.append(record.id)
            by_id[record.id] = record
        if duplicates:
            raise ValidationError(
                "Career catalog contains duplicate ids",
                field="id",
                validation_errors=duplicates,
            )

        self._careers = records
        self._by_id = by_id
        logger.debug(f"Career catalog loaded with {len(records)} careers")

    def list_careers(self) -> List[CareerRecord]:
        """All careers in insertion order."""
        return list(self._careers)

    def by_sector(self, sector: Sector) -> List[CareerRecord]:
        """Careers belonging to one sector, in insertion order."""
        return [career for career in self._careers if career.sector == sector]

    def get(self, career_id: str) -> Optional[CareerRecord]:
        return self._by_id.get(career_id)

    def named_career(self, profile: StudentProfile) -> Optional[CareerRecord]:
        """The catalog record for the career the student named, if any."""
        if profile.specific_career_id is None:
            return None
        return self.get(profile.specific_career_id)

    def find_by_title(self, text: str) -> Optional[CareerRecord]:
        """Find the first career whose title appears in, or contains, ``text``.

        Used to resolve the free-text "other" career answer.
        """
        needle = " ".join(text.lower().split())
        if len(needle) < 3:
            return None
        for career in self._careers:
            title = career.title.lower()
            if title in needle or needle in title:
                return career
        return None

    def __len__(self) -> int:
        return len(self._careers)

    def __iter__(self) -> Iterator[CareerRecord]:
        return iter(self._careers)


__all__ = ["CareerCatalog"]
