from abc import ABC, abstractmethod
from typing import List
from spectracolor.domain.models.reference import Illuminant, Observer, ReferenceTable

class ReferenceRepository(ABC):
    """
    Abstract repository interface for colorimetric reference data.
    Follows the repository pattern for decoupling domain and infrastructure.

    Lookups accept enum members; callers resolve free-form keys first with
    the validators in shared.utils.
    """

    @abstractmethod
    def get_cmf(self, observer: Observer) -> ReferenceTable:
        """
        Colour-matching functions for a standard observer.

        Args:
            observer: The standard observer

        Returns:
            Three-column ReferenceTable of x-bar, y-bar, z-bar

        Raises:
            UnknownObserverException: If no table exists for the observer
        """
        pass

    @abstractmethod
    def get_illuminant(self, illuminant: Illuminant) -> ReferenceTable:
        """
        Relative spectral power distribution of an illuminant.

        Args:
            illuminant: The standard illuminant

        Returns:
            Single-column ReferenceTable

        Raises:
            UnknownIlluminantException: If no table exists for the illuminant
        """
        pass

    @abstractmethod
    def list_illuminants(self) -> List[Illuminant]:
        """Illuminants this repository can serve, in declaration order."""
        pass

    @abstractmethod
    def list_observers(self) -> List[Observer]:
        """Observers this repository can serve, in declaration order."""
        pass
