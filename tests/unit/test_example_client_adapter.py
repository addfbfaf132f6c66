from app.extraction.example_client_adapter import ExampleClientAdapter
from app.extraction.models import ExtractedFields
from app.extraction.parser import parse_answer


class TestExampleClientAdapter:
    def test_returns_fenced_json_with_null_fields(self) -> None:
        answer = ExampleClientAdapter().create_chat_completion(
            model="example",
            system_prompt="s",
            user_prompt="u",
            images=[],
            max_completion_tokens=10,
        )
        assert answer.startswith("```json")
        assert parse_answer(answer) == ExtractedFields()
