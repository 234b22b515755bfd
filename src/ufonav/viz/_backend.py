from __future__ import annotations

import os

import matplotlib as mpl

# IMPORTANT: set backend before importing pyplot anywhere in ufonav.viz
# - UFONAV_MPL_BACKEND wins when set (use "Agg" when running headless).
# - Otherwise prefer a GUI backend if it can actually load; fallback to Agg.
_BACKEND = os.environ.get("UFONAV_MPL_BACKEND", "").strip()
if _BACKEND:
    mpl.use(_BACKEND, force=True)
else:
    import matplotlib.pyplot as plt

    # mpl.use() only records the name; switch_backend() imports it and
    # raises when the framework is missing or the host is headless.
    for candidate in ("TkAgg", "QtAgg", "Agg"):
        # noinspection PyBroadException
        try:
            plt.switch_backend(candidate)
            break
        except Exception:  # pragma: no cover  # noqa: BLE001, S112
            continue
