from fairreview.llm.client_base import BaseChatClient
from fairreview.llm.factory import ModelInvokerFactory
from fairreview.llm.invoker import ModelInvoker
from fairreview.llm.preference import ModelPreference

__all__ = ["BaseChatClient", "ModelInvoker", "ModelInvokerFactory", "ModelPreference"]
