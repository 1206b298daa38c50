"""Models package."""

from .organization import Organization
from .user import User
from .credits_wallet import CreditsWallet
from .usage_event import UsageEvent
from .trend import Trend
from .brand import Brand
from .video_job import VideoJob
from .platform_virality_profile import PlatformViralityProfile
