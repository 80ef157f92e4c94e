"""Testing – in-memory doubles for the transport port."""
from airship_push.testing.fakes import FakeTransport, RecordedRequest

__all__ = ["FakeTransport", "RecordedRequest"]
