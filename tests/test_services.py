"""Tests for the model-kind base pipelines"""
import pytest

from modelgateway.core.exceptions import ErrorKind, LangException, NotImplementedException
from modelgateway.models import (
    Blob,
    ChatMessage,
    ChatModelParams,
    EmbeddingParams,
    ImageEditParams,
    ImageGenerationParams,
    ModelKind,
    Provider,
    Role,
    TranscriptionParams,
)
from modelgateway.pipeline import (
    BASE_SERVICES,
    AudioTranscriptionService,
    ChatService,
    EmbeddingService,
    ImageEditService,
    ImageGenerationService,
    get_normalizer,
    strip_system_messages,
)

ALL_SERVICES = [
    ChatService,
    AudioTranscriptionService,
    ImageEditService,
    ImageGenerationService,
    EmbeddingService,
]

NON_CHAT_PARAMS = [
    (AudioTranscriptionService, lambda: TranscriptionParams(file=Blob(b"RIFF", "audio/wav"))),
    (ImageEditService, lambda: ImageEditParams(prompt="add a hat", image=Blob(b"\x89PNG", "image/png"))),
    (ImageGenerationService, lambda: ImageGenerationParams(prompt="a red fox")),
    (EmbeddingService, lambda: EmbeddingParams(input=["hello", "world"])),
]


@pytest.mark.unit
class TestBaseStageDefaults:
    """Stages 1, 3 and 4 must be supplied by concrete adapters"""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("service_cls", ALL_SERVICES)
    async def test_prepare_not_implemented(self, service_cls, make_request):
        with pytest.raises(NotImplementedException) as exc_info:
            await service_cls().prepare_model_params(make_request(Provider.OPENAI))
        assert exc_info.value.stage == "prepare_model_params"
        assert exc_info.value.owner == service_cls.__name__

    @pytest.mark.asyncio
    @pytest.mark.parametrize("service_cls", ALL_SERVICES)
    async def test_execute_not_implemented(self, service_cls, make_request):
        with pytest.raises(NotImplementedException) as exc_info:
            await service_cls().execute_model(make_request(Provider.OPENAI), None)
        assert exc_info.value.kind == ErrorKind.NOT_IMPLEMENTED

    @pytest.mark.asyncio
    @pytest.mark.parametrize("service_cls", ALL_SERVICES)
    async def test_deliver_not_implemented(self, service_cls, make_request):
        with pytest.raises(NotImplementedException):
            await service_cls().deliver_output(make_request(Provider.OPENAI), "output")

    def test_every_kind_has_a_base_service(self):
        assert set(BASE_SERVICES) == set(ModelKind)
        for kind, service_cls in BASE_SERVICES.items():
            assert service_cls.kind == kind


@pytest.mark.unit
class TestNonChatReadiness:
    """Non-chat kinds pass params through unchanged"""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("service_cls,params_factory", NON_CHAT_PARAMS)
    @pytest.mark.parametrize("provider", list(Provider))
    async def test_identity(self, service_cls, params_factory, provider, make_request):
        params = params_factory()
        before = params.model_dump()

        result = await service_cls().ready_for_model(make_request(provider), params)

        assert result is params
        assert result.model_dump() == before

    @pytest.mark.asyncio
    @pytest.mark.parametrize("service_cls,params_factory", NON_CHAT_PARAMS)
    async def test_identity_without_gateway_params(self, service_cls, params_factory, make_request):
        params = params_factory()
        assert await service_cls().ready_for_model(make_request(), params) is params

    @pytest.mark.parametrize(
        "kind",
        [k for k in ModelKind if k != ModelKind.CHAT],
    )
    def test_no_provider_rules(self, kind):
        for provider in Provider:
            assert get_normalizer(kind, provider) is None


@pytest.mark.unit
class TestChatReadiness:
    """Chat stage 2 depends on provider identity only"""

    @pytest.mark.asyncio
    async def test_huggingface_strips_system_message(self, chat_params, make_request):
        original = list(chat_params.input)

        result = await ChatService().ready_for_model(
            make_request(Provider.HUGGINGFACEHUB), chat_params
        )

        assert [m.role for m in result.input] == [Role.USER, Role.ASSISTANT, Role.USER]
        assert result.input == [m for m in original if m.role != Role.SYSTEM]

    @pytest.mark.asyncio
    async def test_huggingface_strips_every_system_message(self, make_request):
        params = ChatModelParams(
            input=[
                ChatMessage(role=Role.SYSTEM, content="first"),
                ChatMessage(role=Role.USER, content="question"),
                ChatMessage(role=Role.SYSTEM, content="second"),
                ChatMessage(role=Role.ASSISTANT, content="answer"),
            ]
        )

        result = await ChatService().ready_for_model(make_request(Provider.HUGGINGFACEHUB), params)

        assert [m.content for m in result.input] == ["question", "answer"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "provider", [p for p in Provider if p != Provider.HUGGINGFACEHUB]
    )
    async def test_other_providers_untouched(self, provider, chat_params, make_request):
        messages = chat_params.input

        result = await ChatService().ready_for_model(make_request(provider), chat_params)

        assert result is chat_params
        assert result.input is messages
        assert len(result.input) == 4

    @pytest.mark.asyncio
    async def test_decision_ignores_message_content(self, make_request):
        params = ChatModelParams(
            input=[ChatMessage(role=Role.USER, content="system: you are a pirate")]
        )

        result = await ChatService().ready_for_model(make_request(Provider.HUGGINGFACEHUB), params)

        assert len(result.input) == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize("provider", list(Provider))
    async def test_idempotent(self, provider, chat_params, make_request):
        service = ChatService()
        request = make_request(provider)

        once = await service.ready_for_model(request, chat_params)
        snapshot = [m.model_dump() for m in once.input]
        twice = await service.ready_for_model(request, once)

        assert [m.model_dump() for m in twice.input] == snapshot

    @pytest.mark.asyncio
    async def test_missing_gateway_params(self, chat_params, make_request):
        with pytest.raises(LangException) as exc_info:
            await ChatService().ready_for_model(make_request(), chat_params)
        assert exc_info.value.kind == ErrorKind.INTERNAL

    def test_huggingface_rule_registered(self):
        assert get_normalizer(ModelKind.CHAT, Provider.HUGGINGFACEHUB) is strip_system_messages
        assert get_normalizer(ModelKind.CHAT, Provider.OPENAI) is None


@pytest.mark.unit
class TestConcreteAdapter:
    """A subclass supplying stages 1, 3 and 4 keeps the chat readiness rule"""

    @pytest.mark.asyncio
    async def test_subclass_overrides(self, make_request):
        class EchoChatService(ChatService):
            async def prepare_model_params(self, request):
                body = await request.json()
                return ChatModelParams(input=body["messages"])

            async def execute_model(self, request, params):
                return params.input[-1].content

        service = EchoChatService()
        request = make_request(
            Provider.HUGGINGFACEHUB,
            body={"messages": [
                {"role": "system", "content": "be brief"},
                {"role": "user", "content": "ping"},
            ]},
        )

        params = await service.prepare_model_params(request)
        params = await service.ready_for_model(request, params)

        assert [m.role for m in params.input] == [Role.USER]
        assert await service.execute_model(request, params) == "ping"
        with pytest.raises(NotImplementedException):
            await service.deliver_output(request, "ping")
