"""Unit tests for the response builder."""

import random
import time
from datetime import datetime

import pytest

from rollout_target.models.identity import BehaviorMode, ServiceIdentity
from rollout_target.services.response_builder import MESSAGES, ResponseBuilder
from tests.fixtures.common_mocks import ScriptedRandom


def make_identity(behavior=BehaviorMode.NORMAL) -> ServiceIdentity:
    return ServiceIdentity(version="3.1", behavior=behavior, hostname="pod-a")


@pytest.mark.unit
class TestResponseBuilder:
    """Payload assembly for every route."""

    def test_every_mode_has_at_least_three_messages(self):
        for mode in BehaviorMode:
            assert len(MESSAGES[mode]) >= 3
            assert all(MESSAGES[mode])

    @pytest.mark.parametrize("mode", list(BehaviorMode))
    def test_message_belongs_to_mode(self, mode):
        builder = ResponseBuilder(make_identity(mode), random.Random(0))

        seen = {builder.message() for _ in range(200)}

        assert seen == set(MESSAGES[mode])

    def test_message_index_comes_from_random_source(self):
        builder = ResponseBuilder(make_identity(BehaviorMode.SLOW), ScriptedRandom([2]))

        assert builder.message() == "High latency detected"

    def test_envelope_carries_identity(self):
        builder = ResponseBuilder(make_identity(BehaviorMode.CHAOTIC), ScriptedRandom([0]))

        envelope = builder.envelope()

        assert envelope.version == "3.1"
        assert envelope.behavior == "chaotic"
        assert envelope.hostname == "pod-a"
        assert envelope.message == "Unpredictable behavior"
        assert envelope.headers is None
        parsed = datetime.fromisoformat(envelope.timestamp)
        assert parsed.tzinfo is not None

    def test_envelope_keeps_headers(self):
        builder = ResponseBuilder(make_identity(), ScriptedRandom([1]))

        envelope = builder.envelope(headers={"X-Correlation-ID": "abc"})

        assert envelope.headers == {"X-Correlation-ID": "abc"}

    def test_health_payloads(self):
        builder = ResponseBuilder(make_identity())

        assert builder.health().model_dump() == {
            "status": "healthy",
            "version": "3.1",
            "hostname": "pod-a",
        }
        assert builder.unhealthy().model_dump() == {
            "status": "unhealthy",
            "reason": "simulated failure",
        }

    def test_data_items_in_range(self):
        builder = ResponseBuilder(make_identity(), random.Random(7))

        payloads = [builder.data() for _ in range(500)]

        assert all(0 <= p.items < 100 for p in payloads)
        assert all(p.processed for p in payloads)
        assert payloads[0].version == "3.1"
        assert payloads[0].hostname == "pod-a"

    def test_process_reports_elapsed_milliseconds(self):
        builder = ResponseBuilder(make_identity())
        started_at = time.perf_counter() - 0.25

        payload = builder.process(started_at)

        assert payload.status == "completed"
        assert 250 <= payload.duration < 1000
