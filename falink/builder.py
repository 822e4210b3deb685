"""Frame factory bound to the local node configuration."""

from __future__ import annotations

import logging
from typing import Any

from .config.model import CodecConfig
from .protocol import protocol
from .protocol.errors import FrameNotImplementedError
from .protocol.frames import Cyclic, ParticipationRequest, Token, Trigger

logger = logging.getLogger(__name__)


class FrameBuilder:
    """Builds outbound frames from a :class:`CodecConfig`.

    Every frame gets the next value of a per-builder SEQ counter, wrapping at
    32 bits. The builder performs no I/O and does not schedule anything.
    """

    def __init__(self, config: CodecConfig | None = None, *, sequence: int = 0) -> None:
        self.config = config or CodecConfig()
        self._sequence = sequence & protocol.UINT32_MASK

    @property
    def sequence(self) -> int:
        return self._sequence

    def _next_sequence(self) -> int:
        value = self._sequence
        self._sequence = (value + 1) & protocol.UINT32_MASK
        return value

    def _header_defaults(self) -> dict[str, Any]:
        return {
            "major_version": self.config.major_version,
            "minor_version": self.config.minor_version,
            "token_watchdog": self.config.token_watchdog,
            "refresh_cycle_time": self.config.refresh_cycle_time,
        }

    def _names(self) -> dict[str, str]:
        return {
            "node_name": self.config.node_name,
            "vendor_name": self.config.vendor_name,
            "manufacturer_name": self.config.manufacturer_name,
        }

    def token(self, destination_node: int, *, token_holder: bool = False, participating: bool = False) -> Token:
        frame = Token.new(
            self.config.node_number,
            destination_node,
            token_holder=token_holder,
            participating=participating,
            sequence=self._next_sequence(),
            **self._header_defaults(),
        )
        logger.debug("Built token for node %d (seq=%d)", destination_node, frame.header.sequence)
        return frame

    def trigger(self, destination_node: int = protocol.BROADCAST_NODE) -> Trigger:
        return Trigger.new(
            self.config.node_number,
            destination_node,
            sequence=self._next_sequence(),
            **self._names(),
            **self._header_defaults(),
        )

    def participation_request(self, destination_node: int = protocol.BROADCAST_NODE) -> ParticipationRequest:
        return ParticipationRequest.new(
            self.config.node_number,
            destination_node,
            sequence=self._next_sequence(),
            common_address1=self.config.common_address1,
            common_size1=self.config.common_size1,
            common_address2=self.config.common_address2,
            common_size2=self.config.common_size2,
            **self._names(),
            **self._header_defaults(),
        )

    def cyclic(
        self,
        destination_node: int,
        data: bytes | bytearray | memoryview = b"",
        *,
        version_sequence: int = 0,
    ) -> Cyclic:
        return Cyclic.new(
            self.config.node_number,
            destination_node,
            version_sequence,
            self.config.common_address1,
            self.config.common_size1,
            self.config.common_address2,
            self.config.common_size2,
            data,
            sequence=self._next_sequence(),
            **self._header_defaults(),
        )

    def build(
        self, type_code: int, destination_node: int, data: bytes = b""
    ) -> Token | Trigger | ParticipationRequest | Cyclic:
        """Build a frame selected by *type_code*; unsupported codes raise."""
        if type_code == protocol.TypeCode.TOKEN:
            return self.token(destination_node)
        if type_code == protocol.TypeCode.TRIGGER:
            return self.trigger(destination_node)
        if type_code == protocol.TypeCode.PARTICIPATION_REQUEST:
            return self.participation_request(destination_node)
        if type_code == protocol.TypeCode.CYCLIC:
            return self.cyclic(destination_node, data)
        raise FrameNotImplementedError(type_code)
