"""Gateway stand-ins and canned responses shared by the tests."""

from __future__ import annotations

import json
from typing import Any

import httpx


class StubGateway:
    """Stand-in for the chat-completion gateway that records every request."""

    def __init__(self, *responses: httpx.Response) -> None:
        self._responses = list(responses)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        template = self._responses.pop(0) if len(self._responses) > 1 else self._responses[0]
        # Fresh response per call; httpx binds a response to a single request.
        return httpx.Response(
            template.status_code,
            headers=template.headers,
            content=template.content,
        )

    def respond_with(self, *responses: httpx.Response) -> None:
        self._responses = list(responses)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    def sent_body(self, index: int = 0) -> dict[str, Any]:
        return json.loads(self.requests[index].content)


def chat_response(content: Any) -> httpx.Response:
    return httpx.Response(
        200,
        json={"choices": [{"message": {"role": "assistant", "content": content}}]},
    )


def tool_call_response(arguments: Any) -> httpx.Response:
    if not isinstance(arguments, str):
        arguments = json.dumps(arguments, ensure_ascii=False)
    return httpx.Response(
        200,
        json={
            "choices": [
                {
                    "message": {
                        "role": "assistant",
                        "content": None,
                        "tool_calls": [
                            {
                                "id": "call-1",
                                "type": "function",
                                "function": {
                                    "name": "generate_ax_ideas",
                                    "arguments": arguments,
                                },
                            }
                        ],
                    }
                }
            ]
        },
    )


def make_idea(role: str, title: str | None = None) -> dict[str, Any]:
    return {
        "title": title or f"{role} 아이디어",
        "role": role,
        "description": "검사 데이터 기반 솔루션",
        "userRole": "최종 판단",
        "expectedEffect": "검사 시간 단축",
        "effectDetails": ["리드타임 30% 감소"],
        "keywords": ["QA", "자동화"],
        "technologies": ["LLM", "RAG"],
    }


SAMPLE_IDEAS = [make_idea("Assistant"), make_idea("Advisor"), make_idea("Agent")]

SAMPLE_REPORT = (
    "## 1. 역할 및 책임\nQA 엔지니어가 검사 결과를 검토합니다.\n\n"
    "## 2. 기대 효과\n검사 시간이 줄어듭니다.\n\n"
    "## 3. 핵심 키워드\n- 자동화\n- 품질\n\n"
    "## 4. 권장 기술 스택\n- FastAPI\n"
)

