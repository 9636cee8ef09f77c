"""
Random source used by the game engine
"""

from typing import List, Optional, Sequence, TypeVar
import numpy as np

T = TypeVar("T")


class RandomSource:
    """
    Uniform draws over finite sets

    Wraps a numpy Generator so the engine never touches global random state.
    Pass a seed for reproducible runs, or an existing Generator to share one.
    """

    def __init__(
        self,
        random_seed: Optional[int] = None,
        generator: Optional[np.random.Generator] = None
    ):
        self.random_seed = random_seed
        self.generator = generator if generator is not None else np.random.default_rng(random_seed)

    def choice(self, options: Sequence[T]) -> T:
        """Pick one element of options uniformly at random"""
        if len(options) == 0:
            raise ValueError("Cannot choose from an empty sequence")
        return options[int(self.generator.integers(len(options)))]

    def shuffle(self, items: Sequence[T]) -> List[T]:
        """Return a uniformly random permutation of items as a new list"""
        order = self.generator.permutation(len(items))
        return [items[int(i)] for i in order]
