"""Quick in-process check that the API loads and answers a small scenario."""
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from fastapi.testclient import TestClient
from devgraph.api.main import create_app

client = TestClient(create_app())
client.post("/api/users", json={"username": "ferris", "interests": ["async", "embedded", "wasm"]})
client.post("/api/users", json={"username": "rustacean", "interests": ["async", "cli"]})

r = client.get("/api/health")
print("Health status:", r.status_code)
print("Response:", r.json())

r = client.get("/api/users/ferris/recommendations")
print("Recommendations status:", r.status_code)
print("Response:", r.json())
