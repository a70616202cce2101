from dotenv import load_dotenv

from citepanel import Feedback, Message, MessageRenderer, RenderConfig, Role, SourceRecord, compose_message


def main() -> None:
    # Load CITEPANEL_* overrides from .env if present
    load_dotenv()

    renderer = MessageRenderer(RenderConfig.from_env())

    content = compose_message(
        "The standard savings rate is 5% [1], reviewed quarterly [1].",
        [
            SourceRecord(
                id="1",
                title="Rate Sheet",
                detail_text="Savings: 5%\nChecking: 0.5%",
                url="https://example.com/rates",
            ),
            SourceRecord(id="2", title="Policy Doc", detail_text="General policy."),
        ],
    )
    message = Message(role=Role.ASSISTANT, content=content, id="msg-1")

    print("▶ Rendering message...\n")
    rendered = renderer.render(message)
    print("Answer:")
    print(rendered.primary_answer)
    print("\nVisible sources:")
    for source in rendered.visible_sources:
        link = f" <{source.url}>" if source.url else ""
        print(f"- [{source.id}] {source.title}{link}")

    state = renderer.new_interaction_state(
        message, on_feedback=lambda message_id, value: print(f"\nFeedback {value} on {message_id}")
    )
    state.toggle_expanded("1")
    state.set_feedback(Feedback.UP)
    print("Source 1 expanded:", state.is_expanded("1"))


if __name__ == "__main__":
    main()
