import logging
import sys

from scrollthumb.settings import DEFAULT_PATH, load_settings
from demo.app import DemoApp

def main():
    cfg = load_settings(sys.argv[1] if len(sys.argv) > 1 else DEFAULT_PATH)
    logging.basicConfig(
        level=getattr(logging, cfg.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = DemoApp(cfg)
    app.run()

if __name__ == "__main__":
    main()
