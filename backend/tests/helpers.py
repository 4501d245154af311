"""Sample texts and a fake LLM client shared by the test modules."""

import asyncio
import json


class FakeLLMClient:
    """Stands in for LLMClient: returns canned replies and records prompts.

    ``replies`` items may be strings, exceptions (raised) or callables
    taking the messages. The last item repeats once the list runs out.
    """

    def __init__(self, *replies, delay: float = 0.0):
        self.replies = list(replies) or [json.dumps({"insights": "Looks good."})]
        self.delay = delay
        self.calls: list[list[dict[str, str]]] = []

    async def complete(self, messages, **options):
        self.calls.append(messages)
        if self.delay:
            await asyncio.sleep(self.delay)
        reply = self.replies[min(len(self.calls) - 1, len(self.replies) - 1)]
        if isinstance(reply, BaseException):
            raise reply
        if callable(reply):
            return reply(messages)
        return reply


def enhancement_reply(insights="Strong backend profile.", improvements=None, strengths=None) -> str:
    return json.dumps({
        "insights": insights,
        "improvements": improvements or [],
        "strengths": strengths or [],
    })


SAMPLE_RESUME = """
Jane Smith
jane.smith@email.com | +1-555-0100

Experience

Senior Software Engineer, Acme Corp
2019 - Present
- Built Python microservices with Django and PostgreSQL
- Deployed services on AWS using Docker and Kubernetes
- Mentored four engineers and drove agile ceremonies

Skills

Python, Django, PostgreSQL, Docker, Kubernetes, AWS, Jest, communication
"""

SAMPLE_JD = """
Backend Engineer

We are looking for a backend engineer with strong Python and Django skills.
Experience with PostgreSQL and Redis is required, as is hands-on work with
Docker, Kubernetes and Terraform. Familiarity with GraphQL is a plus, and
leadership experience will set you apart.
"""
