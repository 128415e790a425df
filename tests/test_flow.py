"""Tests for the request lifecycle flow."""

import pytest

from thesis_topics import messages
from thesis_topics.errors import CredentialError, ErrorKind, ParseError
from thesis_topics.flow import Completion, FlowPhase, RequestState, TopicRequestFlow
from thesis_topics.llm.schemas import ApiResponse


class TestSubmit:
    """Tests for TopicRequestFlow.submit."""

    @pytest.mark.parametrize("keywords", ["", "   ", "\n\t "])
    def test_blank_keywords_never_call_service(self, recording_generate, keywords):
        generate = recording_generate()
        flow = TopicRequestFlow(generate=generate)

        state = flow.submit(RequestState(), keywords)

        assert generate.calls == []
        assert state.phase is FlowPhase.FAILURE
        assert state.error == messages.EMPTY_KEYWORDS
        assert state.topics is None
        assert state.loading is False

    def test_success_keeps_topics_in_order(self, recording_generate, sample_response):
        generate = recording_generate(response=sample_response)
        flow = TopicRequestFlow(generate=generate)

        state = flow.submit(RequestState(), "NLP, Persian")

        assert generate.calls == ["NLP, Persian"]
        assert state.phase is FlowPhase.SUCCESS
        assert len(state.topics) == 3
        assert [t.title for t in state.topics] == [t.title for t in sample_response.topics]
        assert state.error is None
        assert state.loading is False

    def test_zero_topics_is_success(self, recording_generate):
        flow = TopicRequestFlow(generate=recording_generate(response=ApiResponse(topics=[])))

        state = flow.submit(RequestState(), "quantum")

        assert state.phase is FlowPhase.SUCCESS
        assert state.topics == []

    @pytest.mark.parametrize("message", [
        "Rpc failed due to xhr error. uri: https://example, error code: 6",
        "Error code: 404 - Requested entity was not found.",
    ])
    def test_credential_markers_show_prompt(self, recording_generate, message):
        flow = TopicRequestFlow(generate=recording_generate(error=RuntimeError(message)))

        state = flow.submit(RequestState(), "robotics")

        assert state.phase is FlowPhase.CREDENTIAL_PROMPT
        assert state.credential_prompt_visible is True
        assert state.credential_valid is False
        assert state.error == messages.CREDENTIAL_FAILURE

    def test_structured_credential_error_shows_prompt(self, recording_generate):
        flow = TopicRequestFlow(generate=recording_generate(error=CredentialError("Incorrect API key")))

        state = flow.submit(RequestState(), "robotics")

        assert state.phase is FlowPhase.CREDENTIAL_PROMPT

    def test_unrelated_error_shows_raw_message(self, recording_generate):
        flow = TopicRequestFlow(generate=recording_generate(error=TimeoutError("network timeout")))

        state = flow.submit(RequestState(), "robotics")

        assert state.phase is FlowPhase.FAILURE
        assert state.error == "network timeout"
        assert state.credential_prompt_visible is False

    def test_empty_error_message_uses_fallback(self, recording_generate):
        flow = TopicRequestFlow(generate=recording_generate(error=RuntimeError()))

        state = flow.submit(RequestState(), "robotics")

        assert state.error == messages.GENERIC_FAILURE

    def test_parse_error_is_generic_failure(self, recording_generate):
        flow = TopicRequestFlow(generate=recording_generate(error=ParseError("Failed to parse AI response.")))

        state = flow.submit(RequestState(), "robotics")

        assert state.phase is FlowPhase.FAILURE
        assert state.error == "Failed to parse AI response."

    def test_resubmission_replaces_topics(self, recording_generate, sample_topics):
        first = ApiResponse(topics=sample_topics)
        second = ApiResponse(topics=sample_topics[:1])
        generate = recording_generate(response=first)
        flow = TopicRequestFlow(generate=generate)

        state = flow.submit(RequestState(), "AI")
        generate.response = second
        state = flow.submit(state, "AI")

        assert len(generate.calls) == 2
        assert len(state.topics) == 1

    def test_resubmission_clears_previous_error(self, recording_generate, sample_response):
        generate = recording_generate(error=RuntimeError("boom"))
        flow = TopicRequestFlow(generate=generate)
        state = flow.submit(RequestState(), "AI")

        generate.error = None
        generate.response = sample_response
        state = flow.submit(state, "AI")

        assert state.error is None
        assert state.phase is FlowPhase.SUCCESS


class TestBeginAndComplete:
    """Tests for request-id keyed completion."""

    def test_begin_submit_resets_and_marks_loading(self, sample_topics):
        flow = TopicRequestFlow()
        previous = RequestState(topics=sample_topics, error="old", phase=FlowPhase.SUCCESS)

        state = flow.begin_submit(previous, "AI")

        assert state.loading is True
        assert state.phase is FlowPhase.SUBMITTING
        assert state.topics is None
        assert state.error is None
        assert state.request_id

    def test_each_submission_gets_new_request_id(self):
        flow = TopicRequestFlow()
        a = flow.begin_submit(RequestState(), "AI")
        b = flow.begin_submit(a, "AI")
        assert a.request_id != b.request_id

    def test_stale_response_is_discarded(self, sample_response):
        flow = TopicRequestFlow()
        first = flow.begin_submit(RequestState(), "AI")
        second = flow.begin_submit(first, "robotics")

        state = flow.complete(second, Completion(request_id=first.request_id, response=sample_response))

        assert state is second
        assert state.topics is None
        assert state.loading is True

    def test_overlapping_submissions_keep_only_latest(self, recording_generate, sample_topics):
        generate = recording_generate(response=ApiResponse(topics=sample_topics))
        flow = TopicRequestFlow(generate=generate)
        first = flow.begin_submit(RequestState(), "AI")
        first_done = flow.execute(first.request_id, "AI")
        second = flow.begin_submit(first, "robotics")
        generate.response = ApiResponse(topics=sample_topics[:1])
        second_done = flow.execute(second.request_id, "robotics")

        state = flow.complete(second, second_done)
        state = flow.complete(state, first_done)

        assert state.phase is FlowPhase.SUCCESS
        assert state.keywords == "robotics"
        assert len(state.topics) == 1

    def test_execute_classifies_errors(self, recording_generate):
        flow = TopicRequestFlow(generate=recording_generate(error=CredentialError("Incorrect API key")))

        completion = flow.execute("abc", "AI")

        assert completion.request_id == "abc"
        assert completion.response is None
        assert completion.error == "Incorrect API key"
        assert completion.error_kind is ErrorKind.CREDENTIAL

    def test_execute_success(self, recording_generate, sample_response):
        completion = TopicRequestFlow(generate=recording_generate(response=sample_response)).execute("abc", "AI")
        assert completion.error_kind is None
        assert completion.response == sample_response

    def test_current_response_is_applied(self, sample_response):
        flow = TopicRequestFlow()
        pending = flow.begin_submit(RequestState(), "AI")

        state = flow.complete(pending, Completion(request_id=pending.request_id, response=sample_response))

        assert state.phase is FlowPhase.SUCCESS
        assert state.loading is False

    def test_state_survives_json_round_trip(self, sample_response):
        flow = TopicRequestFlow()
        pending = flow.begin_submit(RequestState(), "AI")
        state = flow.complete(pending, Completion(request_id=pending.request_id, response=sample_response))

        restored = RequestState.model_validate(state.model_dump(mode="json"))

        assert restored == state
        assert restored.phase is FlowPhase.SUCCESS


class TestReselectCredential:
    """Tests for TopicRequestFlow.reselect_credential."""

    def _prompt_state(self):
        return RequestState(
            keywords="AI",
            error=messages.CREDENTIAL_FAILURE,
            credential_prompt_visible=True,
            credential_valid=False,
            phase=FlowPhase.CREDENTIAL_PROMPT,
        )

    def test_success_returns_to_idle_without_resubmitting(self, recording_generate, stub_selector):
        generate = recording_generate()
        selector = stub_selector()
        flow = TopicRequestFlow(generate=generate, credential_selector=selector)

        state = flow.reselect_credential(self._prompt_state())

        assert selector.calls == 1
        assert generate.calls == []
        assert state.phase is FlowPhase.IDLE
        assert state.error is None
        assert state.credential_valid is True
        assert state.credential_prompt_visible is False
        assert state.loading is False

    def test_unavailable_selector_keeps_prompt(self, stub_selector):
        selector = stub_selector(available=False)
        flow = TopicRequestFlow(credential_selector=selector)

        state = flow.reselect_credential(self._prompt_state())

        assert selector.calls == 0
        assert state.error == messages.SELECTOR_UNAVAILABLE
        assert state.credential_prompt_visible is True
        assert state.phase is FlowPhase.CREDENTIAL_PROMPT

    def test_default_selector_is_unavailable(self):
        state = TopicRequestFlow().reselect_credential(self._prompt_state())
        assert state.error == messages.SELECTOR_UNAVAILABLE

    def test_failed_selection_keeps_prompt(self, stub_selector):
        flow = TopicRequestFlow(credential_selector=stub_selector(fail=True))

        state = flow.reselect_credential(self._prompt_state())

        assert state.error == messages.SELECTOR_FAILED
        assert state.credential_prompt_visible is True
        assert state.credential_valid is False
