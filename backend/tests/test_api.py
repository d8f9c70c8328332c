"""API tests — routers over the in-memory store with a fake LLM."""

from app.services.ai_client import AIClientError


def _messages(*contents):
    return [{"role": "user", "content": c} for c in contents]


class TestClassesAPI:
    """Class routes."""

    def test_list_demo_classes(self, client):
        """The demo user sees the seeded classes."""
        resp = client.get("/api/classes")
        assert resp.status_code == 200
        titles = [c["title"] for c in resp.json()["classes"]]
        assert '9-й класс "Е"' in titles

    def test_create_rename_delete(self, client):
        """A class can be created, renamed and deleted."""
        created = client.post("/api/classes", json={"title": "7-A"})
        assert created.status_code == 201
        class_id = created.json()["id"]

        renamed = client.patch(f"/api/classes/{class_id}", json={"title": "7-B"})
        assert renamed.json()["title"] == "7-B"

        assert client.delete(f"/api/classes/{class_id}").status_code == 204
        assert client.get(f"/api/classes/{class_id}").status_code == 404

    def test_empty_title_rejected(self, client):
        """An empty title is a validation error."""
        assert client.post("/api/classes", json={"title": ""}).status_code == 422

    def test_other_users_class_is_hidden(self, client, memory_storage):
        """Another user's class is reported as missing."""
        from app.schemas.class_ import ClassCreate

        foreign = memory_storage.create_class("someone-else", ClassCreate(title="X"))
        assert client.get(f"/api/classes/{foreign.id}").status_code == 404
        assert client.get(f"/api/classes/{foreign.id}/materials").status_code == 404


class TestThreadsAPI:
    """Thread and message routes."""

    def test_thread_and_messages(self, client):
        """Messages posted to a thread are listed back."""
        thread = client.post("/api/classes/demo-class-1/threads", json={}).json()
        assert thread["title"] == "New chat"

        client.post(f"/api/threads/{thread['id']}/messages", json={"role": "user", "content": "hi"})
        resp = client.get(f"/api/threads/{thread['id']}/messages")
        assert [m["content"] for m in resp.json()["messages"]] == ["hi"]

        listed = client.get("/api/classes/demo-class-1/threads").json()["threads"]
        assert [t["id"] for t in listed] == [thread["id"]]

    def test_invalid_role(self, client):
        """Unknown message roles are rejected."""
        thread = client.post("/api/classes/demo-class-1/threads", json={}).json()
        resp = client.post(f"/api/threads/{thread['id']}/messages", json={"role": "bot", "content": "x"})
        assert resp.status_code == 422


class TestMaterialsAPI:
    """Material routes."""

    def test_list_and_filter(self, client):
        """Materials can be filtered by type."""
        resp = client.get("/api/classes/demo-class-1/materials")
        assert resp.json()["total"] == 2

        resp = client.get("/api/classes/demo-class-1/materials", params={"type": "presentation"})
        assert [m["id"] for m in resp.json()["materials"]] == ["demo-material-2"]

    def test_create_update_delete(self, client):
        """A material can be created, edited and deleted."""
        created = client.post(
            "/api/classes/demo-class-2/materials",
            json={"type": "document", "title": "Parents letter", "content": "Dear parents"},
        )
        assert created.status_code == 201
        material_id = created.json()["id"]
        assert created.json()["ai_generated"] is False

        updated = client.patch(f"/api/materials/{material_id}", json={"content": "Hello"})
        assert updated.json()["content"] == "Hello"

        assert client.delete(f"/api/materials/{material_id}").status_code == 204
        assert client.get(f"/api/materials/{material_id}").status_code == 404

    def test_null_title_leaves_title_unchanged(self, client, memory_storage):
        """PATCH with a null title keeps the stored title."""
        resp = client.patch("/api/materials/demo-material-1", json={"title": None, "content": "Updated"})

        assert resp.status_code == 200
        assert resp.json()["title"] is not None
        assert resp.json()["content"] == "Updated"
        assert memory_storage.get_material("demo-material-1").title == resp.json()["title"]

    def test_unknown_type_rejected(self, client):
        """Unknown material types are rejected."""
        resp = client.post(
            "/api/classes/demo-class-2/materials",
            json={"type": "schedule", "title": "x"},
        )
        assert resp.status_code == 422


class TestChatAPI:
    """Free chat route."""

    def test_reply(self, client, fake_llm):
        """The LLM reply is returned with the localized system prompt."""
        fake_llm.reply = "Hello, teacher!"
        resp = client.post("/api/chat", json={"messages": _messages("hi"), "language": "en"})

        assert resp.status_code == 200
        assert resp.json() == {"content": "Hello, teacher!"}
        call = fake_llm.calls[0]
        assert "SmartUstaz" in call["system"]
        assert call["messages"] == [{"role": "user", "content": "hi"}]

    def test_presentation_request_is_enhanced(self, client, fake_llm):
        """Presentation requests reach the LLM rewritten."""
        client.post(
            "/api/chat",
            json={"messages": _messages("Make 7 slides about Abai"), "language": "en"},
        )
        sent = fake_llm.calls[0]["messages"][-1]["content"]
        assert sent.startswith("Make 7 slides about Abai")
        assert "Slide 7:" in sent
        assert "Slide 8:" not in sent

    def test_huge_slide_count_is_capped(self, client, fake_llm):
        """A huge slide count in chat text is capped before reaching the LLM."""
        resp = client.post(
            "/api/chat",
            json={"messages": _messages("Make 999999999 slides about Abai"), "language": "en"},
        )
        assert resp.status_code == 200
        sent = fake_llm.calls[0]["messages"][-1]["content"]
        assert "Slide 100:" in sent
        assert "Slide 101:" not in sent

    def test_empty_messages(self, client, fake_llm):
        """An empty conversation is a 400 and no LLM call."""
        resp = client.post("/api/chat", json={"messages": []})
        assert resp.status_code == 400
        assert fake_llm.calls == []

    def test_llm_failure(self, client, fake_llm):
        """A provider error is a 500 with a generic message."""
        fake_llm.error = AIClientError("boom")
        resp = client.post("/api/chat", json={"messages": _messages("hi")})
        assert resp.status_code == 500
        assert resp.json()["detail"] == "Failed to get a response from the AI"

    def test_empty_reply_uses_fallback(self, client, fake_llm):
        """An empty reply is replaced by the fallback text."""
        fake_llm.reply = ""
        resp = client.post("/api/chat", json={"messages": _messages("hi"), "language": "en"})
        assert resp.json()["content"] == "Sorry, something went wrong."


class TestClassChatAPI:
    """Class chat route with material auto-save."""

    def test_saves_material_and_thread(self, client, fake_llm, memory_storage):
        """A lesson plan reply is saved and the exchange stored."""
        thread = client.post("/api/classes/demo-class-2/threads", json={}).json()
        fake_llm.reply = "Lesson objectives: ..."

        resp = client.post(
            "/api/classes/demo-class-2/chat",
            json={
                "messages": _messages("create a lesson plan about fractions"),
                "thread_id": thread["id"],
                "language": "en",
            },
        )

        assert resp.status_code == 200
        body = resp.json()
        assert body["content"] == "Lesson objectives: ..."
        assert body["material"]["type"] == "lesson_plan"
        assert body["material"]["title"] == '''Lesson plan for 10-й класс "А"'''
        assert body["material"]["thread_id"] == thread["id"]

        stored = memory_storage.list_messages(thread["id"])
        assert [(m.role, m.content) for m in stored] == [
            ("user", "create a lesson plan about fractions"),
            ("assistant", "Lesson objectives: ..."),
        ]

    def test_thread_keeps_original_prompt(self, client, fake_llm, memory_storage):
        """The thread stores the prompt as the teacher typed it."""
        thread = client.post("/api/classes/demo-class-2/threads", json={}).json()
        client.post(
            "/api/classes/demo-class-2/chat",
            json={"messages": _messages("make a presentation"), "thread_id": thread["id"]},
        )
        assert memory_storage.list_messages(thread["id"])[0].content == "make a presentation"

    def test_no_match_saves_nothing(self, client, fake_llm, memory_storage):
        """Ordinary replies are not saved."""
        fake_llm.reply = "Hi! How can I help you today?"
        resp = client.post("/api/classes/demo-class-3/chat", json={"messages": _messages("hello")})

        assert resp.json()["material"] is None
        assert memory_storage.list_materials("demo-class-3") == []

    def test_llm_failure_saves_nothing(self, client, fake_llm, memory_storage):
        """A failed LLM call stores nothing."""
        fake_llm.error = AIClientError("boom")
        resp = client.post(
            "/api/classes/demo-class-3/chat",
            json={"messages": _messages("create a lesson plan")},
        )
        assert resp.status_code == 500
        assert memory_storage.list_materials("demo-class-3") == []

    def test_storage_failure_does_not_break_chat(self, client, fake_llm, memory_storage, monkeypatch):
        """A failed save still returns the reply."""
        def broken(class_id, data):
            raise RuntimeError("database is down")

        monkeypatch.setattr(memory_storage, "create_material", broken)
        fake_llm.reply = "Plan: ..."

        resp = client.post(
            "/api/classes/demo-class-3/chat",
            json={"messages": _messages("create a lesson plan")},
        )
        assert resp.status_code == 200
        assert resp.json() == {"content": "Plan: ...", "material": None}

    def test_thread_from_other_class(self, client):
        """A thread of another class is rejected."""
        thread = client.post("/api/classes/demo-class-1/threads", json={}).json()
        resp = client.post(
            "/api/classes/demo-class-2/chat",
            json={"messages": _messages("hi"), "thread_id": thread["id"]},
        )
        assert resp.status_code == 400


class TestGenerateMaterialAPI:
    """Structured generation route."""

    def test_generate_without_saving(self, client, fake_llm):
        """Without class_id the material is only returned."""
        fake_llm.reply = "Slide 1: ..."
        resp = client.post(
            "/api/generate-material",
            json={
                "type": "presentation",
                "data": {"topic": "Volcanoes", "grade": "7", "slides": 6},
                "language": "en",
            },
        )
        assert resp.status_code == 200
        assert resp.json() == {"content": "Slide 1: ...", "material": None}
        prompt = fake_llm.calls[0]["messages"][0]["content"]
        assert "EXACTLY 6 slides" in prompt
        assert fake_llm.calls[0]["max_tokens"] == 4000

    def test_generate_and_save(self, client, fake_llm, memory_storage):
        """With class_id the material is saved to the class."""
        fake_llm.reply = "1. What is 1/2 + 1/4?"
        resp = client.post(
            "/api/generate-material",
            json={
                "type": "test",
                "data": {"subject": "Math", "grade": "5", "topic": "Fractions"},
                "class_id": "demo-class-3",
                "language": "en",
            },
        )
        material = resp.json()["material"]
        assert material["type"] == "test"
        assert material["title"] == "Test: Fractions"
        assert material["ai_generated"] is True
        assert [m.id for m in memory_storage.list_materials("demo-class-3")] == [material["id"]]

    def test_unknown_type(self, client, fake_llm):
        """Only lesson plans, presentations and tests can be generated."""
        resp = client.post("/api/generate-material", json={"type": "document", "data": {}})
        assert resp.status_code == 422
        assert fake_llm.calls == []

    def test_llm_failure(self, client, fake_llm):
        """A provider error is a 500."""
        fake_llm.error = AIClientError("boom")
        resp = client.post(
            "/api/generate-material",
            json={"type": "lesson_plan", "data": {"subject": "Math", "grade": "5", "topic": "Fractions"}},
        )
        assert resp.status_code == 500


class TestHealth:
    """Health route."""

    def test_health(self, client):
        """The health route answers ok."""
        assert client.get("/health").json()["status"] == "ok"
