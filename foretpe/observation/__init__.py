from .store import Observation, ObservationStore, Split

__all__ = ["Observation", "ObservationStore", "Split"]
