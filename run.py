from __future__ import annotations

import os

from scriptures.config import env_flag
from scriptures.factory import create_app

app = create_app()

if __name__ == "__main__":
    port = int(os.getenv("PORT", "5000"))
    debug = env_flag("FLASK_DEBUG", "true")
    app.run(host="0.0.0.0", port=port, debug=debug)
