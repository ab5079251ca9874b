from flashdeck.application.learning.protocols.card_suggestion_service import CardSuggestion
from flashdeck.infrastructure.ai.ai_agents import get_card_generation_agent


def build_card_prompt(
    topic: str,
    description: str | None,
    existing_pairs: list[CardSuggestion],
    count: int,
) -> str:
    """Lay out the deck context the agent works from."""
    parts = [f"Topic: {topic}"]
    if description:
        parts.append(f"Description: {description}")
    if existing_pairs:
        parts.append("\nExisting cards (do not repeat these):")
        parts.extend(f"- Q: {p.front} | A: {p.back}" for p in existing_pairs)
    parts.append(f"\nGenerate exactly {count} new flashcards.")
    return "\n".join(parts)


class AIService:
    async def suggest_cards(
        self,
        topic: str,
        description: str | None,
        existing_pairs: list[CardSuggestion],
        count: int,
    ) -> list[CardSuggestion]:
        agent = get_card_generation_agent()
        result = await agent.run(build_card_prompt(topic, description, existing_pairs, count))
        return [CardSuggestion(front=c.front, back=c.back) for c in result.output]
