"""Registry of state configurations and the hierarchy between them."""

import logging
from typing import Dict, Iterator, List, Optional

from ..core.state_config import StateConfig
from ..core.states import State

logger = logging.getLogger(__name__)


class StateRegistry:
    """
    Owns one StateConfig per distinct state for the lifetime of a machine.
    Configs are created lazily the first time a state is referenced, whether
    it is configured directly or named as a target or parent. Parent links are
    stored as state keys and resolved here, so the hierarchy never holds
    references between configs.
    """

    def __init__(self) -> None:
        self._configs: Dict[State, StateConfig] = {}

    def register(self, state: State) -> StateConfig:
        """
        Get the config for a state, creating an empty one if absent.
        """
        config = self._configs.get(state)
        if config is None:
            config = StateConfig(self, state)
            self._configs[state] = config
            logger.debug("Registered state %s", state)
        return config

    def get(self, state: State) -> Optional[StateConfig]:
        """Return the config for a state without creating it."""
        return self._configs.get(state)

    def parent_of(self, config: StateConfig) -> Optional[StateConfig]:
        """Resolve a config's parent key to the parent's config."""
        if config.parent is None:
            return None
        return self._configs[config.parent]

    def ancestors(self, config: StateConfig) -> Iterator[StateConfig]:
        """
        Walk from ``config`` up through its parents to the root, yielding
        ``config`` itself first. The hierarchy is assumed to be acyclic.
        """
        current: Optional[StateConfig] = config
        while current is not None:
            yield current
            current = self.parent_of(current)

    def states(self) -> List[State]:
        """All registered states, in registration order."""
        return list(self._configs)

    def __contains__(self, state: object) -> bool:
        return state in self._configs

    def __len__(self) -> int:
        return len(self._configs)
