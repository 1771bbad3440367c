"""
Tests des routes d'administration (camelCase) et des routes IA.
"""
from app.domain.services.ai_content_service import parse_feature_list


class TestCategories:

    def test_camel_case_round_trip(self, client):
        body = client.post("/api/admin/categories", json={
            "categoryName": "Nutrition", "iconName": "leaf", "routePath": "/nutrition", "displayOrder": 2,
        }).json()
        assert body["categoryName"] == "Nutrition"
        assert body["routePath"] == "/nutrition"
        assert body["isActive"] is True
        assert "createdAt" in body and "updatedAt" in body

    def test_list_ordered_by_display_order_desc(self, client):
        for name, order in (("a", 1), ("b", 3), ("c", 2)):
            client.post("/api/admin/categories", json={
                "categoryName": name, "iconName": "i", "routePath": f"/{name}", "displayOrder": order,
            })
        names = [c["categoryName"] for c in client.get("/api/admin/categories").json()]
        assert names == ["b", "c", "a"]

    def test_partial_update_and_delete(self, client):
        created = client.post("/api/admin/categories", json={
            "categoryName": "Sommeil", "iconName": "moon", "routePath": "/sleep",
        }).json()

        updated = client.put(f"/api/admin/categories/{created['id']}", json={"isActive": False}).json()
        assert updated["isActive"] is False
        assert updated["categoryName"] == "Sommeil"
        assert updated["updatedAt"] >= created["updatedAt"]

        assert client.delete(f"/api/admin/categories/{created['id']}").status_code == 200
        resp = client.delete(f"/api/admin/categories/{created['id']}")
        assert resp.json() == {"error": "Category not found"}


    def test_null_for_required_field_is_bad_request(self, client):
        created = client.post("/api/admin/categories", json={
            "categoryName": "Sommeil", "iconName": "moon", "routePath": "/sleep",
        }).json()
        resp = client.put(f"/api/admin/categories/{created['id']}", json={"categoryName": None})
        assert resp.status_code == 400
        assert "categoryName" in resp.json()["error"]


class TestContentAndPlans:

    def test_page_content(self, client):
        for page, key in (("home", "title"), ("home", "subtitle"), ("about", "title")):
            client.post("/api/admin/content", json={
                "pageName": page, "contentType": "text", "contentKey": key, "contentValue": "...",
            })
        assert len(client.get("/api/admin/content").json()) == 3
        home = client.get("/api/admin/content/home").json()
        assert {c["contentKey"] for c in home} == {"title", "subtitle"}

    def test_plan_features_list(self, client):
        plan = client.post("/api/admin/subscriptions", json={
            "planName": "Premium", "price": "9.99", "billingPeriod": "month",
            "features": ["Themes", "Statistiques"],
        }).json()
        assert plan["features"] == ["Themes", "Statistiques"]

        updated = client.put(f"/api/admin/subscriptions/{plan['id']}", json={"features": ["Tout"]}).json()
        assert updated["features"] == ["Tout"]
        assert updated["planName"] == "Premium"

    def test_content_ordered_by_display_order_desc(self, client):
        for key, order in (("title", 1), ("footer", 3), ("body", 2)):
            client.post("/api/admin/content", json={
                "pageName": "home", "contentType": "text", "contentKey": key, "contentValue": "...",
                "displayOrder": order,
            })
        keys = [c["contentKey"] for c in client.get("/api/admin/content/home").json()]
        assert keys == ["footer", "body", "title"]

    def test_plans_ordered_by_display_order_desc(self, client):
        for name, order in (("Basic", 0), ("Lifetime", 2), ("Premium", 1)):
            client.post("/api/admin/subscriptions", json={
                "planName": name, "price": "0", "billingPeriod": "month", "displayOrder": order,
            })
        names = [p["planName"] for p in client.get("/api/admin/subscriptions").json()]
        assert names == ["Lifetime", "Premium", "Basic"]

    def test_null_features_is_bad_request(self, client):
        plan = client.post("/api/admin/subscriptions", json={
            "planName": "Premium", "price": "9.99", "billingPeriod": "month",
        }).json()
        resp = client.put(f"/api/admin/subscriptions/{plan['id']}", json={"features": None})
        assert resp.status_code == 400


class TestAIContent:

    def test_generate_content_prefixes_context(self, client, text_generator):
        text_generator.responses = ["Texte genere"]
        resp = client.post("/api/admin/ai/generate-content", json={
            "prompt": "Decris la meditation", "contentType": "description", "context": "Application bien-etre",
        })
        assert resp.json() == {"generatedContent": "Texte genere"}
        call = text_generator.calls[0]
        assert call["prompt"] == "Application bien-etre\n\nDecris la meditation"
        assert "product description" in call["system"]

    def test_improve_content(self, client, text_generator):
        text_generator.responses = ["Mieux"]
        resp = client.post("/api/admin/ai/improve-content", json={
            "content": "Bof", "improvementType": "clarity",
        })
        assert resp.json() == {"improvedContent": "Mieux"}
        assert text_generator.calls[0]["prompt"].endswith("Bof")

    def test_generate_features_json(self, client, text_generator):
        text_generator.responses = ['["Suivi illimite", "Themes exclusifs"]']
        resp = client.post("/api/admin/ai/generate-features", json={"planName": "Pro", "planType": "premium"})
        assert resp.json() == {"features": ["Suivi illimite", "Themes exclusifs"]}

    def test_unknown_improvement_type(self, client):
        resp = client.post("/api/admin/ai/improve-content", json={"content": "x", "improvementType": "louder"})
        assert resp.status_code == 400


class TestParseFeatureList:

    def test_line_fallback_strips_markers(self):
        text = "- Suivi illimite\n• Themes exclusifs\n\n* Support prioritaire\nSans puce"
        assert parse_feature_list(text) == [
            "Suivi illimite", "Themes exclusifs", "Support prioritaire", "Sans puce",
        ]

    def test_json_array(self):
        assert parse_feature_list('["a", "b"]') == ["a", "b"]
