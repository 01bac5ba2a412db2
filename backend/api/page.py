"""HTML for the prediction form served at ``/``.

Each edit is posted to ``/form/validate``; the server answers with the
stored value, so rejected edits snap back to the previous text. Edits are
sent one at a time, and submit waits for the queue before posting the whole
form state to ``/predict``.
"""

from html import escape
from string import Template

from models.schemas.field_spec import FieldSpec


def _fmt(number: float) -> str:
    return f"{number:g}"


_FIELD_TEMPLATE = Template("""
        <div class="field">
          <label for="$key">$label</label>
          <p class="hint">$description <span class="range">(Range: $min-$max)</span></p>
          <input type="number" id="$key" name="$key" min="$min" max="$max" step="$step"
                 placeholder="Enter value" autocomplete="off" />
        </div>""")

_PAGE_TEMPLATE = Template("""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1" />
  <title>Placement Predictor</title>
  <style>
    body { font-family: system-ui, -apple-system, sans-serif; margin: 0; background: #eef2ff; color: #1f2937; }
    main { max-width: 860px; margin: 40px auto; padding: 0 16px 32px; }
    h1 { margin: 0 0 8px; font-size: 36px; text-align: center; }
    .subtitle { text-align: center; color: #4b5563; margin-bottom: 32px; }
    .card { background: #fff; border-radius: 16px; padding: 28px; margin-bottom: 24px; box-shadow: 0 8px 24px rgba(0,0,0,0.08); }
    .grid { display: grid; grid-template-columns: repeat(auto-fit, minmax(300px, 1fr)); gap: 20px; margin-bottom: 24px; }
    label { display: block; font-weight: 600; font-size: 14px; margin-bottom: 4px; }
    .hint { font-size: 12px; color: #6b7280; margin: 0 0 8px; }
    .range { color: #2563eb; font-weight: 500; }
    input { width: 100%; box-sizing: border-box; padding: 10px 14px; border: 2px solid #e5e7eb; border-radius: 10px; font-size: 17px; font-weight: 600; }
    input:focus { outline: none; border-color: #3b82f6; }
    .actions { text-align: center; }
    button { padding: 14px 32px; border: none; border-radius: 10px; font-size: 17px; font-weight: 600; color: #fff; background: #4f46e5; cursor: pointer; }
    button:disabled { background: #9ca3af; cursor: not-allowed; }
    #result { display: none; text-align: center; }
    .score { display: inline-flex; align-items: center; justify-content: center; width: 128px; height: 128px; border-radius: 50%; color: #fff; font-size: 28px; font-weight: 700; margin-bottom: 20px; }
    .tier { display: inline-block; padding: 10px 22px; border-radius: 999px; color: #fff; font-weight: 600; }
    .message { margin-top: 20px; padding: 14px; background: #f9fafb; border-radius: 10px; color: #4b5563; }
    .green { background: #16a34a; }
    .yellow { background: #eab308; }
    .red { background: #dc2626; }
  </style>
</head>
<body>
  <main>
    <h1>Placement Predictor</h1>
    <p class="subtitle">Estimate your placement success probability from your academic profile</p>

    <section class="card">
      <form id="predict-form" onsubmit="return false;">
        <div class="grid">$fields
        </div>
        <div class="actions">
          <button type="button" id="predict-btn" disabled>Predict Placement Score</button>
        </div>
      </form>
    </section>

    <section class="card" id="result">
      <h3>Prediction Results</h3>
      <div class="score" id="score"></div><br />
      <div class="tier" id="tier"></div>
      <p class="message" id="message"></p>
    </section>
  </main>

  <script>
    const FIELD_KEYS = $keys;
    const RESULT_DELAY_MS = $delay;
    const button = document.getElementById("predict-btn");
    let state = {};
    let ready = false;
    let loading = false;
    let pending = 0;
    // Edits are validated one at a time, each against the state the previous one left
    let editQueue = Promise.resolve();
    FIELD_KEYS.forEach(function (key) { state[key] = ""; });

    function refreshButton() {
      button.disabled = !ready || loading || pending > 0;
      button.textContent = loading ? "Analyzing..." : "Predict Placement Score";
    }

    async function postJson(url, payload) {
      const res = await fetch(url, {
        method: "POST",
        headers: { "Content-Type": "application/json" },
        body: JSON.stringify(payload),
      });
      const data = await res.json();
      if (!res.ok) {
        const detail = data.detail && data.detail.message ? data.detail.message : data.detail;
        throw new Error(typeof detail === "string" ? detail : res.statusText);
      }
      return data;
    }

    async function submitEdit(key, input) {
      const sent = input.value;
      try {
        const data = await postJson("/form/validate", { field: key, raw_text: sent, state: state });
        state = data.state;
        ready = data.ready;
        // If the user typed again meanwhile, the queued edit for that text decides
        if (!data.accepted && input.value === sent) {
          input.value = data.value;
        }
      } catch (err) {
        console.error("Validation failed:", err);
        if (input.value === sent) {
          input.value = state[key];
        }
      } finally {
        pending -= 1;
        refreshButton();
      }
    }

    FIELD_KEYS.forEach(function (key) {
      const input = document.getElementById(key);
      input.addEventListener("input", function () {
        pending += 1;
        refreshButton();
        editQueue = editQueue.then(function () { return submitEdit(key, input); });
      });
    });

    function showResult(data) {
      const color = data.color;
      const score = document.getElementById("score");
      const tier = document.getElementById("tier");
      score.textContent = data.percentage.toFixed(1) + "%";
      score.className = "score " + color;
      tier.textContent = data.tier;
      tier.className = "tier " + color;
      document.getElementById("message").textContent = data.message;
      document.getElementById("result").style.display = "block";
    }

    button.addEventListener("click", async function () {
      loading = true;
      refreshButton();
      try {
        await editQueue;
        const data = await postJson("/predict", state);
        await new Promise(function (resolve) { setTimeout(resolve, RESULT_DELAY_MS); });
        showResult(data);
      } catch (err) {
        alert("Prediction failed: " + err.message);
      } finally {
        loading = false;
        refreshButton();
      }
    });
  </script>
</body>
</html>
""")


def render_field(spec: FieldSpec) -> str:
    return _FIELD_TEMPLATE.substitute(
        key=escape(spec.key),
        label=escape(spec.label),
        description=escape(spec.description),
        min=_fmt(spec.min),
        max=_fmt(spec.max),
        step=_fmt(spec.step),
    )


def render_page(fields: list[FieldSpec], result_delay_ms: int = 0) -> str:
    """Render the full form page for the given field catalogue."""
    keys = ", ".join(f'"{escape(spec.key)}"' for spec in fields)
    return _PAGE_TEMPLATE.substitute(
        fields="".join(render_field(spec) for spec in fields),
        keys=f"[{keys}]",
        delay=max(0, int(result_delay_ms)),
    )
