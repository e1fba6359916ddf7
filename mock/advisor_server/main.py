from fastapi import FastAPI, HTTPException, Request
import os

app = FastAPI(title="Mock Advisor Server", version="1.0.0")
# Set MOCK_ADVISOR_FAIL=1 to exercise the gateway's "unavailable" path
FAIL = os.getenv("MOCK_ADVISOR_FAIL") == "1"

@app.get("/health")
def health(): return {"status": "ok"}

@app.post("/chat/completions")
async def chat_completions(request: Request):
    if FAIL:
        raise HTTPException(status_code=503, detail="advisor offline")
    body = await request.json()
    question = body["messages"][-1]["content"]
    return {
        "id": "mock-completion",
        "model": body.get("model", "mock"),
        "choices": [{
            "index": 0,
            "message": {"role": "assistant", "content": f"Mock advice for: {question}"},
            "finish_reason": "stop",
        }],
    }
