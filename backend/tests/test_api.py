"""End-to-end tests for the HTTP endpoints and their status mapping."""

API = "/api/v1"

AUSTIN = {"line1": "123 Main St", "city": "Austin", "state": "TX", "zip": "78701"}

YES_NO_QUESTIONS = [
    {"questionId": 1, "text": "Do you smoke?"},
    {
        "questionId": 2,
        "text": "How many per day?",
        "visibilityCondition": {"kind": "equals_response", "questionId": 1, "expectedValue": "yes"},
    },
]


def test_health(api_client):
    response = api_client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


class TestAddressEndpoints:
    def test_validate_ok(self, api_client, fake_service):
        fake_service.on("POST", "/Address/Validate", json={"isValid": True})

        response = api_client.post(f"{API}/address/validate", json=AUSTIN)

        assert response.status_code == 200
        assert response.json() == {"isValid": True, "errors": [], "normalizedAddress": None}

    def test_validate_accepts_address1_alias(self, api_client, fake_service):
        fake_service.on("POST", "/Address/Validate", json={"isValid": True})
        payload = {"address1": "123 Main St", "city": "Austin", "state": "TX", "zip": "78701"}

        assert api_client.post(f"{API}/address/validate", json=payload).status_code == 200

    def test_validate_missing_field_is_400(self, api_client, fake_service):
        response = api_client.post(f"{API}/address/validate", json={**AUSTIN, "line1": ""})

        assert response.status_code == 400
        assert "line1" in response.json()["detail"]
        assert fake_service.call_count == 0

    def test_validate_upstream_failure_is_500_with_generic_message(self, api_client, fake_service):
        fake_service.on("POST", "/Address/Validate", status_code=500, text="stack trace here")

        response = api_client.post(f"{API}/address/validate", json=AUSTIN)

        assert response.status_code == 500
        body = response.json()
        assert body["isValid"] is False
        assert body["errors"] == ["Failed to validate address. Please try again."]
        assert "stack trace" not in response.text

    def test_zip_info_ok(self, api_client, fake_service):
        fake_service.on(
            "GET",
            "/Address/Counties/78701",
            json=[{"county": "TRAVIS", "city": "AUSTIN", "state": "TX", "preferred": True}],
        )

        response = api_client.get(f"{API}/address/zip-info", params={"zipCode": "78701"})

        assert response.status_code == 200
        body = response.json()
        assert (body["zipCode"], body["city"], body["state"], body["county"]) == ("78701", "AUSTIN", "TX", "TRAVIS")

    def test_zip_info_numeric_fips_codes(self, api_client, fake_service):
        fake_service.on(
            "GET",
            "/Address/Counties/78701",
            json=[{"county": "TRAVIS", "city": "AUSTIN", "state": "TX", "countyFipsCode": 453, "preferred": True}],
        )

        response = api_client.get(f"{API}/address/zip-info", params={"zipCode": "78701"})

        assert response.status_code == 200
        assert response.json()["countyFipsCode"] == "453"
        assert response.json()["allOptions"][0]["countyFipsCode"] == "453"

    def test_zip_info_bad_format_is_400(self, api_client, fake_service):
        response = api_client.get(f"{API}/address/zip-info", params={"zipCode": "7870"})

        assert response.status_code == 400
        assert response.json()["detail"] == "ZIP code must be 5 digits"
        assert fake_service.call_count == 0

    def test_zip_info_missing_is_400(self, api_client):
        response = api_client.get(f"{API}/address/zip-info")

        assert response.status_code == 400
        assert response.json()["detail"] == "ZIP code is required"

    def test_zip_info_not_found_is_404(self, api_client, fake_service):
        fake_service.on("GET", "/Address/Counties/99999", json=[])

        response = api_client.get(f"{API}/address/zip-info", params={"zipCode": "99999"})

        assert response.status_code == 404
        assert response.json()["detail"] == "ZIP code not found or invalid"

    def test_zip_info_upstream_failure_hides_diagnostic(self, api_client, fake_service):
        fake_service.on("GET", "/Address/Counties/78701", status_code=503, text="db password wrong")

        response = api_client.get(f"{API}/address/zip-info", params={"zipCode": "78701"})

        assert response.status_code == 500
        assert response.json()["detail"] == "Failed to get ZIP code information"
        assert "password" not in response.text

    def test_validate_zip_valid(self, api_client, fake_service):
        fake_service.on("GET", "/Address/StateAbbreviation/78701", text='"TX"')

        response = api_client.get(f"{API}/address/validate-zip/78701")

        assert response.json() == {"valid": True, "zipCode": "78701", "state": "TX", "error": None}

    def test_validate_zip_not_found(self, api_client, fake_service):
        fake_service.on("GET", "/Address/StateAbbreviation/00000", status_code=404, text="")

        response = api_client.get(f"{API}/address/validate-zip/00000")

        assert response.status_code == 200
        assert response.json()["valid"] is False
        assert response.json()["error"] == "ZIP code not found"

    def test_validate_zip_bad_format(self, api_client):
        assert api_client.get(f"{API}/address/validate-zip/abcde").status_code == 400


class TestEligibilityEndpoints:
    def test_visible_after_yes(self, api_client):
        response = api_client.post(f"{API}/eligibility/visible", json={
            "questions": YES_NO_QUESTIONS,
            "responses": [{"questionId": 1, "response": "yes"}],
        })

        assert response.status_code == 200
        assert response.json() == {"visibleQuestionIds": [1, 2], "totalQuestions": 2}

    def test_validate_reports_required_follow_up(self, api_client):
        response = api_client.post(f"{API}/eligibility/validate", json={
            "questions": YES_NO_QUESTIONS,
            "responses": [{"questionId": 1, "response": "yes"}],
        })

        body = response.json()
        assert body["isValid"] is False
        assert body["errors"] == ["Question 2 is required"]
        assert body["remainingCount"] == 1
        assert body["friendlyErrors"] == [{"label": "How many per day?", "questionId": 2}]
        assert body["inlineErrors"] == {"2": "This question is required."}

    def test_validate_after_no_is_valid(self, api_client):
        response = api_client.post(f"{API}/eligibility/validate", json={
            "questions": YES_NO_QUESTIONS,
            "responses": [{"questionId": 1, "response": "no"}],
        })

        body = response.json()
        assert body["isValid"] is True
        assert body["errors"] == []
        assert body["visibleQuestionIds"] == [1]

    def test_validate_carrier_questions_with_knockout(self, api_client):
        response = api_client.post(f"{API}/eligibility/validate", json={
            "carrierQuestions": [{
                "questionId": 631,
                "questionText": "<p>Hospitalized?</p>",
                "sequenceNo": 1,
                "possibleAnswers": [
                    {"id": 1, "answerText": "Yes", "isKnockOut": True, "errorMessage": "Not eligible"},
                    {"id": 2, "answerText": "No"},
                ],
            }],
            "responses": [{"questionId": 631, "response": "1"}],
        })

        body = response.json()
        assert body["isValid"] is False
        assert body["hasKnockoutAnswers"] is True
        assert body["knockoutAnswers"] == [{"questionId": 631, "answerId": 1, "message": "Not eligible"}]
        assert body["inlineErrors"] == {"631": "Not eligible"}

    def test_malformed_carrier_question_is_422(self, api_client):
        response = api_client.post(f"{API}/eligibility/validate", json={
            "carrierQuestions": [{"questionText": "no id"}],
        })
        assert response.status_code == 422

    def test_non_object_visibility_rule_is_422(self, api_client):
        response = api_client.post(f"{API}/eligibility/visible", json={
            "carrierQuestions": [{"questionId": 1, "questionVisibilityRules": [1]}],
        })
        assert response.status_code == 422

    def test_non_object_carrier_question_is_422(self, api_client):
        response = api_client.post(f"{API}/eligibility/visible", json={"carrierQuestions": [1]})
        assert response.status_code == 422

    def test_duplicate_question_ids_rejected(self, api_client):
        response = api_client.post(f"{API}/eligibility/visible", json={
            "questions": [{"questionId": 1}, {"questionId": 1}],
        })
        assert response.status_code == 422

    def test_prune_drops_hidden_responses(self, api_client):
        response = api_client.post(f"{API}/eligibility/prune", json={
            "questions": YES_NO_QUESTIONS,
            "responses": [
                {"questionId": 1, "response": "no"},
                {"questionId": 2, "response": "10"},
            ],
        })

        assert response.json() == {
            "responses": [{"questionId": 1, "response": "no", "dataKey": None}],
            "removedCount": 1,
        }
