import os
from pathlib import Path

# 프로젝트 루트 경로
PROJECT_ROOT = Path(__file__).parent.parent.parent

# 사이트 data.json 저장소 경로
DATA_PATH = Path(os.environ.get("GETABONUS_DATA_PATH", PROJECT_ROOT / "data" / "data.json"))

# 웹 데이터 경로
WEB_DATA_PATH = PROJECT_ROOT / "web" / "data"

# 목록 스냅샷 출력 경로
OUTPUT_JSON_PATH = WEB_DATA_PATH / "casinos-listing.json"

# 보너스/게임 평점 요약 출력 경로
ITEM_RATINGS_JSON_PATH = WEB_DATA_PATH / "item-ratings.json"

# 사이트 REST API (비어 있으면 data.json 사용)
API_BASE_URL = os.environ.get("GETABONUS_API_URL", "")
API_TIMEOUT = 10.0

# 목록 페이지 크기
PAGE_SIZE = 20
