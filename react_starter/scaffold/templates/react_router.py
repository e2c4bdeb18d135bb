"""React Router page set — routes, layout shell, three pages and the App root.

Written unconditionally into the project's src/ directory. Paths are
relative to the project root.
"""
from __future__ import annotations

FILES: dict[str, str] = {
    "src/routes/AppRoutes.jsx": """import { Routes, Route } from "react-router-dom";
import MainLayout from "../layouts/MainLayout.jsx";
import Home from "../pages/Home.jsx";
import About from "../pages/About.jsx";
import NotFound from "../pages/NotFound.jsx";

export default function AppRoutes() {
  return (
    <Routes>
      <Route element={<MainLayout />}>
        <Route path="/" element={<Home />} />
        <Route path="/about" element={<About />} />
      </Route>
      <Route path="*" element={<NotFound />} />
    </Routes>
  );
}
""",
    "src/layouts/MainLayout.jsx": """import { NavLink, Outlet } from "react-router-dom";

export default function MainLayout() {
  return (
    <div className="min-h-screen bg-slate-950 text-slate-50">
      <header className="border-b border-slate-800">
        <nav className="mx-auto flex max-w-5xl items-center justify-between px-4 py-3">
          <span className="text-lg font-bold text-teal-400">
            Fast React Starter
          </span>
          <div className="flex gap-4 text-sm">
            <NavLink
              to="/"
              className={({ isActive }) =>
                `hover:text-teal-300 ${isActive ? "text-teal-400 font-semibold" : "text-slate-200"}`
              }
            >
              Home
            </NavLink>
            <NavLink
              to="/about"
              className={({ isActive }) =>
                `hover:text-teal-300 ${isActive ? "text-teal-400 font-semibold" : "text-slate-200"}`
              }
            >
              About
            </NavLink>
          </div>
        </nav>
      </header>

      <main className="mx-auto max-w-5xl px-4 py-8">
        <Outlet />
      </main>
    </div>
  );
}
""",
    "src/pages/Home.jsx": """export default function Home() {
  return (
    <section className="space-y-4">
      <h1 className="text-3xl font-bold tracking-tight text-teal-400">
        Welcome 👋
      </h1>
      <p className="text-slate-200">
        This starter comes with React, Vite, Tailwind CSS v4, React Router, and Axios
        pre-configured so you can start building instantly.
      </p>
      <div className="grid gap-4 md:grid-cols-3">
        <div className="rounded-xl border border-slate-800 bg-slate-900/40 p-4">
          <h2 className="text-lg font-semibold text-slate-50">Tailwind Ready</h2>
          <p className="mt-1 text-sm text-slate-400">
            Utility classes are available via <code className="font-mono">@import "tailwindcss"</code> in <code className="font-mono">index.css</code>.
          </p>
        </div>
        <div className="rounded-xl border border-slate-800 bg-slate-900/40 p-4">
          <h2 className="text-lg font-semibold text-slate-50">Routing Setup</h2>
          <p className="mt-1 text-sm text-slate-400">
            Manage routes in <code className="font-mono">src/routes/AppRoutes.jsx</code>.
          </p>
        </div>
        <div className="rounded-xl border border-slate-800 bg-slate-900/40 p-4">
          <h2 className="text-lg font-semibold text-slate-50">API Ready</h2>
          <p className="mt-1 text-sm text-slate-400">
            Use <code className="font-mono">axios</code> for API calls anywhere in your app.
          </p>
        </div>
      </div>
    </section>
  );
}
""",
    "src/pages/About.jsx": """export default function About() {
  return (
    <section className="space-y-4">
      <h1 className="text-2xl font-bold tracking-tight text-teal-400">
        About this template
      </h1>
      <p className="text-slate-200 text-sm leading-relaxed">
        This is a minimal starter wired for fast frontend prototyping: Tailwind v4 for styling,
        React Router for navigation, and Axios for API calls. Customize the layout,
        pages, and components to match your project's needs.
      </p>
    </section>
  );
}
""",
    "src/pages/NotFound.jsx": """import { Link } from "react-router-dom";

export default function NotFound() {
  return (
    <section className="space-y-4">
      <h1 className="text-3xl font-bold tracking-tight text-red-400">
        404 – Page not found
      </h1>
      <p className="text-slate-300">
        The page you are looking for does not exist.
      </p>
      <Link
        to="/"
        className="inline-flex items-center rounded-lg border border-teal-500 px-4 py-2 text-sm font-medium text-teal-200 hover:bg-teal-500/10"
      >
        ← Back to home
      </Link>
    </section>
  );
}
""",
    "src/App.jsx": """import AppRoutes from "./routes/AppRoutes.jsx";

export default function App() {
  return <AppRoutes />;
}
""",
}
