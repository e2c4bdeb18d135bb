"""Application bootstrap: mounts App inside BrowserRouter.

Replaces the skeleton's src/main.jsx; skipped when the skeleton has none.
"""
from __future__ import annotations

FILES: dict[str, str] = {
    "src/main.jsx": """import React from "react";
import ReactDOM from "react-dom/client";
import { BrowserRouter } from "react-router-dom";
import App from "./App.jsx";
import "./index.css";

ReactDOM.createRoot(document.getElementById("root")).render(
  <React.StrictMode>
    <BrowserRouter>
      <App />
    </BrowserRouter>
  </React.StrictMode>
);
""",
}
