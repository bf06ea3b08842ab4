"""API tests for the Architect Labs server (FastAPI TestClient)."""

import json


def _add(client, element_type="button"):
    response = client.post("/api/element", json={"type": element_type})
    assert response.status_code == 200
    return response.json()["element_id"]


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert response.json()["session_ready"] is True


def test_root_and_info(client):
    assert client.get("/").json()["service"] == "Architect Labs"

    info = client.get("/api/info").json()

    assert len(info["component_types"]) == 12
    assert {f["format"] for f in info["export_formats"]} == {"tsx", "html", "json", "css"}
    assert "Pricing Table" in info["templates"]
    assert "dashboard" in [c["name"] for c in info["synthesis_categories"]]


def test_add_element_selects_it(client):
    element_id = _add(client, "card")

    state = client.get("/api/canvas/state").json()

    assert [e["id"] for e in state["elements"]] == [element_id]
    assert state["elements"][0]["label"] == "Card Title"
    assert state["selected_id"] == element_id
    assert state["can_undo"] is True


def test_unknown_element_type_is_rejected(client):
    assert client.post("/api/element", json={"type": "carousel"}).status_code == 422


def test_patch_props_accepts_camel_case(client):
    element_id = _add(client)

    response = client.patch(f"/api/element/{element_id}/props", json={"fontSize": "xl", "bg": "#000"})

    props = response.json()["elements"][0]["props"]
    assert props["fontSize"] == "xl"
    assert props["bg"] == "#000"
    assert props["radius"] == 16


def test_select_unknown_is_404(client):
    assert client.post("/api/element/select", json={"element_id": "missing"}).status_code == 404


def test_move_and_reorder(client):
    a, b, c = _add(client), _add(client), _add(client)

    state = client.post(f"/api/element/{c}/move", json={"direction": "up"}).json()
    assert [e["id"] for e in state["elements"]] == [a, c, b]

    state = client.post("/api/element/reorder", json={"from_id": a, "to_id": b}).json()
    assert [e["id"] for e in state["elements"]] == [c, b, a]


def test_undo_redo(client):
    _add(client)
    _add(client)

    assert len(client.post("/api/canvas/undo").json()["elements"]) == 1
    redone = client.post("/api/canvas/redo").json()
    assert len(redone["elements"]) == 2
    assert redone["can_redo"] is False

    history = client.get("/api/canvas/history").json()
    assert history["past"] == 2
    assert history["future"] == 0


def test_export_formats(client):
    _add(client, "text")

    css = client.get("/api/canvas/export/css")
    assert css.status_code == 200
    assert css.text.startswith("/* Generated by IA ARHITECTE */")

    html = client.get("/api/canvas/export/html")
    assert html.headers["content-type"].startswith("text/html")

    download = client.get("/api/canvas/export/tsx", params={"download": True})
    assert download.headers["content-disposition"] == 'attachment; filename="ia-arh-export.tsx"'

    assert client.get("/api/canvas/export/pdf").status_code == 404


def test_import_rejects_bad_payload_and_keeps_state(client):
    _add(client)

    response = client.post("/api/canvas/import", json={"items": []})

    assert response.status_code == 400
    assert len(client.get("/api/canvas/state").json()["elements"]) == 1


def test_import_replaces_document(client):
    _add(client)
    blob = {
        "elements": [{"id": "x1", "type": "badge", "label": "New", "props": {"badgeColor": "#0f0"}}],
        "theme": "sunset",
        "columns": 2,
    }

    state = client.post("/api/canvas/import", json=blob).json()

    assert [e["id"] for e in state["elements"]] == ["x1"]
    assert state["theme"] == "sunset"
    assert state["columns"] == 2
    assert state["selected_id"] is None


def test_import_accepts_exported_json_text(client):
    _add(client, "hero")
    exported = client.get("/api/canvas/export/json").text
    client.delete("/api/canvas/state")

    state = client.post("/api/canvas/import", json=exported).json()

    assert json.loads(exported)["elements"] == state["elements"]


def test_columns_out_of_range(client):
    assert client.put("/api/canvas/columns", json={"columns": 4}).status_code == 422
    assert client.put("/api/canvas/columns", json={"columns": 3}).json()["columns"] == 3


def test_brand_and_sync(client):
    _add(client)

    client.put("/api/canvas/brand", json={"radius": 30})
    state = client.post("/api/canvas/sync-brand", json={"fields": ["radius"]}).json()

    assert state["brand"]["radius"] == 30
    assert state["elements"][0]["props"]["radius"] == 30
    assert client.post("/api/canvas/sync-brand", json={"fields": ["logo"]}).status_code == 422


def test_generate_dashboard(client):
    response = client.post("/api/chat/generate", json={"prompt": "Build me a SaaS dashboard"})

    body = response.json()
    assert len(body["added_ids"]) == 8
    assert all(i.startswith("AI-") for i in body["added_ids"])
    assert body["state"]["elements"][0]["label"] == "Neural SaaS Platform"

    client.post("/api/canvas/undo")
    assert client.get("/api/canvas/state").json()["elements"] == []


def test_generate_blank_prompt_adds_nothing(client):
    body = client.post("/api/chat/generate", json={"prompt": "   "}).json()

    assert body["added_ids"] == []
    assert body["state"]["can_undo"] is False


def test_chat_message(client):
    _add(client)

    body = client.post("/api/chat/message", json={"message": "make everything red"}).json()

    assert body["response_text"] == "Done! Everything is now Red."
    assert body["action_taken"] == "red"
    assert body["state"]["elements"][0]["props"]["bg"] == "#ef4444"
    assert len(client.get("/api/chat/messages").json()) == 2
    assert client.post("/api/chat/message", json={"message": "  "}).status_code == 400


def test_templates(client):
    state = client.post("/api/canvas/template/Pricing%20Table").json()

    assert len(state["elements"]) == 3
    assert all(e["id"].startswith("T-") for e in state["elements"])
    assert client.post("/api/canvas/template/Nope").status_code == 404


def test_premade_keeps_brand(client):
    client.put("/api/canvas/brand", json={"primary": "#010101"})

    state = client.post("/api/canvas/premade/Glass%20Admin").json()

    assert state["elements"][0]["label"] == "OS-LINK"
    assert state["brand"]["primary"] == "#010101"
    assert client.post("/api/canvas/premade/Nope").status_code == 404


def test_projects_lifecycle(client):
    _add(client, "hero")

    saved = client.post("/api/projects/save", json={"name": "Alpha"}).json()
    assert saved["name"] == "Alpha"
    assert saved["elements"] == 1

    client.delete("/api/canvas/state")
    listing = client.get("/api/projects").json()
    assert [p["name"] for p in listing["saved"]] == ["Alpha"]
    assert len(listing["premade"]) == 10

    state = client.post("/api/projects/load/Alpha").json()
    assert len(state["elements"]) == 1

    assert client.delete("/api/projects/Alpha").status_code == 200
    assert client.delete("/api/projects/Alpha").status_code == 404
    assert client.post("/api/projects/load/Alpha").status_code == 404


def test_shortcuts(client):
    element_id = _add(client)

    body = client.post("/api/shortcut", json={"key": "Escape"}).json()
    assert body["handled"] is True
    assert body["view"]["selected_id"] is None

    body = client.post("/api/shortcut", json={"key": "z", "ctrl": True, "in_text_input": True}).json()
    assert body["handled"] is False
    assert [e["id"] for e in body["state"]["elements"]] == [element_id]

    body = client.post("/api/shortcut", json={"key": "z", "ctrl": True}).json()
    assert body["state"]["elements"] == []


def test_preview(client):
    _add(client, "text")

    response = client.get("/api/canvas/preview", params={"mode": "tablet"})

    assert response.status_code == 200
    assert "width: 768px;" in response.text
    assert "Sample Text" in response.text


def test_state_is_persisted(client, tmp_path):
    _add(client, "badge")

    stored = json.loads((tmp_path / "api-data" / "ia_arh_canvas.json").read_text(encoding="utf-8"))

    assert stored["elements"][0]["type"] == "badge"
    assert "brand" in stored
