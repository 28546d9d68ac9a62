import logging
import os

from shakescroll.app import ShakeApp
from shakescroll.settings import load_settings
from terms.scenes.terms import TermsScene

def main():
    logging.basicConfig(
        level=os.environ.get("SHAKESCROLL_LOG", "WARNING").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = ShakeApp(load_settings(), TermsScene)
    app.run()

if __name__ == "__main__":
    main()
