from .openai_client import CompletionMetadata, OpenAIRewriteClient

__all__ = ["CompletionMetadata", "OpenAIRewriteClient"]
