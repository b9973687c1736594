# module reward.app
from reward.app_setup.factory import create_app

# App globale
app = create_app()
