from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter()

PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>Fake News Detector</title>
  <style>
    body { font-family: Inter, sans-serif; max-width: 720px; margin: 2rem auto; padding: 0 1rem; }
    input, textarea { width: 100%; box-sizing: border-box; margin-bottom: 1rem; padding: .5rem; }
    button { padding: .6rem 1.2rem; }
    .alert { padding: .75rem; margin-bottom: 1rem; border-radius: 4px; }
    .warning { background: #fff4e5; }
    .fake { background: #fdecea; }
    .real { background: #edf7ed; }
    [hidden] { display: none; }
  </style>
</head>
<body>
  <h1>Fake News Detector</h1>
  <div id="error" class="alert warning" hidden></div>
  <input id="title" placeholder="Enter news title" aria-label="News Title (Optional)">
  <textarea id="news" rows="6" placeholder="Enter news content to check" aria-label="Paste news text here..."></textarea>
  <button id="analyze" disabled>Analyze</button>

  <div id="result" hidden>
    <h2 id="verdict"></h2>
    <div id="confidence" class="alert"></div>
    <button id="clear">Clear Result</button>
  </div>

  <script>
    const title = document.getElementById("title");
    const news = document.getElementById("news");
    const analyze = document.getElementById("analyze");
    let loading = false;

    function refreshButton() {
      analyze.disabled = loading || (!news.value.trim() && !title.value.trim());
      analyze.textContent = loading ? "Analyzing..." : "Analyze";
    }

    function render(outcome) {
      const error = document.getElementById("error");
      const result = document.getElementById("result");
      error.hidden = true;
      result.hidden = true;
      if (!outcome) return;
      if (outcome.status === "failure") {
        error.textContent = outcome.message;
        error.hidden = false;
        return;
      }
      document.getElementById("verdict").textContent = outcome.isFake ? "Fake News \\u274c" : "Real News \\u2705";
      const confidence = document.getElementById("confidence");
      confidence.className = "alert " + (outcome.isFake ? "fake" : "real");
      confidence.innerHTML = "Confidence: <strong>" + outcome.confidence + "%</strong>";
      result.hidden = false;
    }

    analyze.addEventListener("click", async () => {
      loading = true;
      refreshButton();
      render(null);
      try {
        const response = await fetch("api/analysis", {
          method: "POST",
          headers: { "Content-Type": "application/json" },
          body: JSON.stringify({ title: title.value, body: news.value }),
        });
        if (!response.ok) throw new Error("HTTP " + response.status);
        render(await response.json());
      } catch (err) {
        render({ status: "failure", message: "Unable to reach the Fake News Detector page server." });
      } finally {
        loading = false;
        refreshButton();
      }
    });

    document.getElementById("clear").addEventListener("click", async () => {
      const response = await fetch("api/analysis", { method: "DELETE" });
      render((await response.json()).outcome);
    });

    title.addEventListener("input", refreshButton);
    news.addEventListener("input", refreshButton);

    fetch("api/analysis").then((r) => r.json()).then((state) => {
      title.value = state.input.title || "";
      news.value = state.input.body || "";
      render(state.outcome);
      refreshButton();
    });
  </script>
</body>
</html>
"""

@router.get("/", response_class=HTMLResponse)
def index():
    return PAGE
