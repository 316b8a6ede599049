"""
CommBoard Password Hashing

Argon2id hashing for the credential directory. Directory passwords are
hashed once at startup so plaintext never sits in the lookup table.
"""

import logging

from argon2 import PasswordHasher, Type
from argon2.exceptions import InvalidHashError, VerificationError

logger = logging.getLogger(__name__)


class PasswordManager:
    """
    Hashes and verifies passwords with Argon2id.

    Parameters default to values that stay cheap on small machines.
    """

    SALT_LENGTH = 16
    HASH_LENGTH = 32

    def __init__(
        self,
        time_cost: int = 3,
        memory_cost_kb: int = 32768,  # 32MB
        parallelism: int = 1
    ):
        """
        Initialize the hasher.

        Args:
            time_cost: Number of iterations
            memory_cost_kb: Memory usage in KB
            parallelism: Number of parallel lanes
        """
        self.time_cost = time_cost
        self.memory_cost_kb = memory_cost_kb
        self.parallelism = parallelism

        self._hasher = PasswordHasher(
            time_cost=time_cost,
            memory_cost=memory_cost_kb,
            parallelism=parallelism,
            hash_len=self.HASH_LENGTH,
            salt_len=self.SALT_LENGTH,
            type=Type.ID
        )

        logger.debug(
            f"PasswordManager initialized: time={time_cost}, "
            f"memory={memory_cost_kb}KB, parallelism={parallelism}"
        )

    def hash_password(self, password: str) -> str:
        """
        Hash a password using Argon2id.

        Returns the full Argon2 hash string including parameters and salt.
        """
        return self._hasher.hash(password)

    def verify_password(self, password: str, hash_str: str) -> bool:
        """
        Verify a password against an Argon2id hash.

        Returns True if password matches, False otherwise.
        """
        try:
            return self._hasher.verify(hash_str, password)
        except VerificationError:
            return False
        except InvalidHashError:
            logger.warning("Malformed password hash in directory")
            return False
