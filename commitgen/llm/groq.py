"""Groq Chat Completion Client"""

import http.client
import json
import socket
import urllib.error
import urllib.request

from commitgen.config import Config
from commitgen.llm.base import ChatMessage, CompletionRequest, CompletionResponse, LLMClient, LLMError, LLMResponse
from commitgen.prompts import PromptBuilder


class GroqClient(LLMClient):
    """Client for Groq's OpenAI-compatible chat completion endpoint."""

    def __init__(self, config: Config):
        if not config.api_key:
            raise LLMError(
                "No API key found. Set GROQ_API_KEY in the .env file:\n"
                "  GROQ_API_KEY=your-key-here"
            )
        self.config = config
        self.model = config.model
        self.timeout = config.timeout
        self._builder = PromptBuilder()

    @property
    def name(self) -> str:
        return f"Groq ({self.model})"

    def build_request(self, diff: str) -> CompletionRequest:
        return CompletionRequest(
            model=self.model,
            messages=[ChatMessage(role="user", content=self._builder.build(diff))],
            temperature=self.config.temperature,
            max_tokens=self.config.max_tokens,
        )

    def _call_api(self, request: CompletionRequest) -> dict:
        """POST one request and return the decoded JSON body."""
        data = json.dumps(request.to_payload()).encode('utf-8')
        req = urllib.request.Request(
            self.config.endpoint,
            data=data,
            headers={
                "Content-Type": "application/json",
                "Authorization": f"Bearer {self.config.api_key}",
            },
            method="POST",
        )

        with urllib.request.urlopen(req, timeout=self.timeout) as response:
            return json.loads(response.read().decode('utf-8'))

    @staticmethod
    def _error_detail(e: urllib.error.HTTPError) -> str:
        """Pull the API's error message out of an error body, if there is one."""
        try:
            body = json.loads(e.read().decode('utf-8'))
            return body["error"]["message"]
        except (ValueError, KeyError, TypeError, OSError):
            return str(e.reason)

    def generate(self, diff: str) -> LLMResponse:
        """Send the diff once and return the trimmed first candidate."""
        request = self.build_request(diff)

        try:
            result = self._call_api(request)
        except urllib.error.HTTPError as e:
            if e.code == 401:
                raise LLMError("Invalid API key. Check GROQ_API_KEY.")
            if e.code == 404:
                raise LLMError(f"Model '{self.model}' not found: {self._error_detail(e)}")
            raise LLMError(f"Groq API error ({e.code}): {self._error_detail(e)}")
        except urllib.error.URLError as e:
            if isinstance(e.reason, socket.timeout):
                raise LLMError(f"Request timed out after {self.timeout}s. Increase it with: --timeout SECONDS")
            raise LLMError(f"Groq request failed: {e.reason}")
        except socket.timeout:
            raise LLMError(f"Request timed out after {self.timeout}s. Increase it with: --timeout SECONDS")
        except (json.JSONDecodeError, UnicodeDecodeError):
            raise LLMError("Invalid response from Groq: body is not JSON.")
        except http.client.HTTPException as e:
            raise LLMError(f"Incomplete response from Groq: {e}")
        except OSError as e:
            raise LLMError(f"Connection to Groq lost: {e}")

        response = CompletionResponse.from_dict(result)
        return LLMResponse(
            content=response.first_content().strip(),
            model=self.model,
            tokens_used=response.tokens_used,
        )
