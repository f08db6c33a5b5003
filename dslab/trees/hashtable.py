"""Hash table of distinct integers with separate chaining and restructuring."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


def hash_function(key: int, m: int) -> int:
    """Bucket index of key in a table of m buckets."""
    return abs(key) % m


def is_prime(n: int) -> bool:
    """Primality test used for table sizes; only odd numbers above 2 qualify."""
    if n <= 2 or n % 2 == 0:
        return False
    return all(n % i != 0 for i in range(3, n // 2 + 1))


def closest_prime(n: int) -> int:
    """The smallest number not below n that is_prime accepts."""
    candidate = n
    while not is_prime(candidate):
        candidate += 1
    return candidate


class HashTable:
    """Fixed number of buckets, each an ordered chain of distinct integers."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("table size must be positive")
        self.buckets: list[list[int]] = [[] for _ in range(size)]

    @property
    def size(self) -> int:
        return len(self.buckets)

    @classmethod
    def from_numbers(cls, numbers: Iterable[int]) -> HashTable:
        """Build a table sized to the closest prime above 0.72 of the distinct count."""
        values = list(numbers)
        distinct = len(set(values))
        if distinct < 1:
            raise ValueError("no numbers to build a table from")
        table = cls(closest_prime(int(0.72 * distinct)))
        for value in values:
            table.add(value)
        return table

    def add(self, num: int) -> bool:
        """Append num to its chain unless present; return whether it was added."""
        chain = self.buckets[hash_function(num, self.size)]
        if num in chain:
            return False
        chain.append(num)
        return True

    def delete(self, num: int) -> None:
        """Remove num; raise KeyError if it is not in the table."""
        chain = self.buckets[hash_function(num, self.size)]
        try:
            chain.remove(num)
        except ValueError:
            raise KeyError(num) from None

    def search(self, num: int) -> tuple[bool, int]:
        """Return whether num is present and the number of comparisons made."""
        comparisons = 0
        for value in self.buckets[hash_function(num, self.size)]:
            comparisons += 1
            if value == num:
                return True, comparisons
        return False, comparisons

    def restructure(self) -> None:
        """Grow the table until it has fewer collisions than before (or none)."""
        initial = self.count_collisions()
        while True:
            grown = max(self.size + self.size // 6, self.size + 1)
            values = list(self)
            self.buckets = [[] for _ in range(closest_prime(grown))]
            for value in values:
                self.add(value)
            collisions = self.count_collisions()
            if collisions < initial or collisions == 0:
                break

    def count_collisions(self) -> int:
        """Number of elements stored behind the first one of their chain."""
        return sum(len(chain) - 1 for chain in self.buckets if chain)

    def __iter__(self) -> Iterator[int]:
        for chain in self.buckets:
            yield from chain

    def __len__(self) -> int:
        return sum(len(chain) for chain in self.buckets)

    def __contains__(self, num: object) -> bool:
        return isinstance(num, int) and self.search(num)[0]

    def format(self) -> str:
        """Table listing: one line per bucket, then the collision count."""
        lines = ["index\tdata"]
        for index, chain in enumerate(self.buckets):
            lines.append(f"{index}\t" + "".join(f"-> {value} " for value in chain))
        lines.append(f"Number of collisions: {self.count_collisions()}")
        return "\n".join(lines)