"""In-memory round store with signed round tokens."""

import logging
from datetime import datetime, timedelta
from uuid import uuid4

from itsdangerous import BadSignature, SignatureExpired, URLSafeTimedSerializer

from config import config
from core.game import RoundState

logger = logging.getLogger(__name__)


class RoundSigner:
    """Sign and verify round IDs using itsdangerous."""

    def __init__(self, secret_key: str | None = None) -> None:
        """Initialize the signer with a secret key."""
        self._secret_key = secret_key or config.security.secret_key
        self._serializer = URLSafeTimedSerializer(self._secret_key)

    def sign(self, round_id: str) -> str:
        """Create a signed token from a round ID."""
        return self._serializer.dumps(round_id)

    def unsign(self, token: str, max_age: int | None = None) -> str | None:
        """
        Verify and extract the round ID from a signed token.

        Args:
            token: The signed token to verify
            max_age: Maximum age in seconds (defaults to round_ttl)

        Returns:
            The round ID if valid, None otherwise
        """
        max_age = max_age or config.round_ttl
        try:
            return self._serializer.loads(token, max_age=max_age)
        except (BadSignature, SignatureExpired):
            return None


# Global signer instance
_round_signer: RoundSigner | None = None


def get_round_signer() -> RoundSigner:
    """Get or create the round signer."""
    global _round_signer
    if _round_signer is None:
        _round_signer = RoundSigner()
    return _round_signer


class InMemoryRoundStore:
    """
    Keeps live rounds in process memory until they expire.

    Rounds are not persisted; a restart drops them.
    """

    def __init__(self) -> None:
        self._rounds: dict[str, tuple[RoundState, datetime]] = {}

    async def get(self, round_id: str) -> RoundState | None:
        """Get a round, or None if unknown or expired."""
        if round_id not in self._rounds:
            return None

        state, expiry = self._rounds[round_id]
        if expiry < datetime.now():
            await self.delete(round_id)
            return None

        return state

    async def set(
        self,
        round_id: str,
        state: RoundState,
        ttl: int | None = None,
    ) -> None:
        """Store a round, dropping any that have expired."""
        await self.cleanup_expired()
        ttl = ttl if ttl is not None else config.round_ttl
        expiry = datetime.now() + timedelta(seconds=ttl)
        self._rounds[round_id] = (state, expiry)

    async def delete(self, round_id: str) -> None:
        """Delete a round."""
        self._rounds.pop(round_id, None)

    async def exists(self, round_id: str) -> bool:
        """Check if a round exists."""
        return await self.get(round_id) is not None

    async def cleanup_expired(self) -> int:
        """Remove expired rounds."""
        now = datetime.now()
        expired = [
            rid for rid, (_, expiry) in self._rounds.items() if expiry < now
        ]
        for rid in expired:
            del self._rounds[rid]
        if expired:
            logger.debug("dropped %d expired round(s)", len(expired))
        return len(expired)

    def __len__(self) -> int:
        return len(self._rounds)


# Global round store instance
_round_store: InMemoryRoundStore | None = None


def get_round_store() -> InMemoryRoundStore:
    """Get or create the round store."""
    global _round_store
    if _round_store is None:
        _round_store = InMemoryRoundStore()
    return _round_store


async def save_round(state: RoundState) -> str:
    """Store a new round and return its signed token."""
    round_id = str(uuid4())
    await get_round_store().set(round_id, state)
    return get_round_signer().sign(round_id)


async def load_round(token: str) -> RoundState | None:
    """Resolve a signed token to its round, or None if invalid or expired."""
    round_id = get_round_signer().unsign(token)
    if round_id is None:
        return None
    return await get_round_store().get(round_id)
