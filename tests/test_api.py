from fastapi.testclient import TestClient
from writeclean.main import app

client = TestClient(app)

def test_health():
    r = client.get("/healthz")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"

def test_sentiment():
    r = client.post("/v1/sentiment", json={"text": "I love this!"})
    assert r.status_code == 200
    data = r.json()
    assert data["label"] == "Very Good"
    assert 0.6 <= data["score"] <= 1.0

def test_sentiment_attributions():
    r = client.post("/v1/sentiment", json={"text": "I love this!"})
    tokens = {t["token"]: t["score"] for t in r.json()["tokens"]}
    assert tokens["love"] == 1.0
    assert tokens["I"] == 0.0

def test_analyze_uses_camel_case_fields():
    r = client.post("/v1/analyze", json={"text": "That movie was totally mid, no cap."})
    assert r.status_code == 200
    data = r.json()
    assert data["rawText"] == "That movie was totally mid, no cap."
    assert data["sentiment"]["slangDetected"] == ["mid", "no cap"]
    assert data["sentiment"]["label"] in ("Neutral", "Bad")
    first = data["tokens"][0]
    assert set(first) == {
        "word", "posTag", "isStopWord", "stemPorter", "stemSnowball", "lemmaWordNet", "lemmaSpacy",
    }
    assert data["improvement"]["original"] == "That movie was totally mid, no cap."

def test_analyze_rejects_blank_text():
    r = client.post("/v1/analyze", json={"text": "   "})
    assert r.status_code == 400
    assert r.json()["error"] == "EmptyInputError"

def test_rewrite():
    r = client.post("/v1/rewrite", json={"text": "i can't believe it's mid lol", "tone": "formal"})
    assert r.status_code == 200
    data = r.json()
    assert data["rewrite"] == "I cannot believe it is mediocre."
    assert 'Replaced slang "mid" with "mediocre"' in data["changes"]
    assert isinstance(data["latency_ms"], int)

def test_rewrite_rejects_unknown_tone():
    r = client.post("/v1/rewrite", json={"text": "hello", "tone": "pirate"})
    assert r.status_code == 422

def test_metrics():
    client.post("/v1/sentiment", json={"text": "ok"})
    r = client.get("/metrics")
    assert r.status_code == 200
    assert "writeclean_requests_total" in r.text

def test_error_responses_are_documented():
    schema = client.get("/openapi.json").json()
    assert "ErrorResponse" in schema["components"]["schemas"]
    responses = schema["paths"]["/v1/analyze"]["post"]["responses"]
    assert "400" in responses and "500" in responses
