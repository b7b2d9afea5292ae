"""카지노 목록 페이지 생성 메인 스크립트

사용 예:
    python -m getabonus.main "search=bitcoin&paymentMethods=Bitcoin,Ethereum&sort=name&order=asc&page=1"
"""

import sys
from urllib.parse import parse_qsl

from getabonus.application.query_params import parse_listing_query
from getabonus.application.use_cases.build_listing import BuildCasinoListingUseCase
from getabonus.application.use_cases.rate_items import RateCatalogItemsUseCase
from getabonus.config.settings import (
    API_BASE_URL,
    API_TIMEOUT,
    DATA_PATH,
    ITEM_RATINGS_JSON_PATH,
    OUTPUT_JSON_PATH,
    PAGE_SIZE,
)
from getabonus.domain.ports.catalog_source import CatalogSource
from getabonus.domain.services.casino_query_pipeline import CasinoQueryPipeline
from getabonus.infrastructure.adapters.site_api_adapter import SiteApiAdapter
from getabonus.infrastructure.repositories.json_catalog import JsonCatalogSource
from getabonus.infrastructure.repositories.json_file_repo import JsonFileRepository


def create_catalog_source() -> CatalogSource:
    """카탈로그 소스 생성 (API URL이 있으면 REST API, 없으면 data.json)"""
    if API_BASE_URL:
        print(f"✓ 사이트 API 사용: {API_BASE_URL}")
        return SiteApiAdapter(API_BASE_URL, timeout=API_TIMEOUT)

    print(f"✓ 로컬 저장소 사용: {DATA_PATH}")
    return JsonCatalogSource(DATA_PATH)


def main(argv: list[str] | None = None):
    """카지노 목록 페이지를 계산해 JSON으로 저장

    1. 카지노/리뷰 조회 및 평점 집계
    2. 검색/필터/정렬/페이지네이션
    3. 목록 스냅샷 저장
    4. 보너스/게임 평점 요약 저장
    """
    argv = sys.argv[1:] if argv is None else argv
    raw_query = argv[0] if argv else ""
    query = parse_listing_query(dict(parse_qsl(raw_query)))

    print("카지노 목록 생성 시작...")

    # 의존성 생성
    catalog = create_catalog_source()
    repository = JsonFileRepository(OUTPUT_JSON_PATH)
    use_case = BuildCasinoListingUseCase(catalog, pipeline=CasinoQueryPipeline(PAGE_SIZE))

    page = use_case.execute(query)
    if page.total_count == 0:
        print("⚠️  조건에 맞는 카지노가 없습니다.")

    print("목록 저장 중...")
    repository.save(page)

    print("보너스/게임 평점 집계 중...")
    bonuses, games = RateCatalogItemsUseCase(catalog).execute()
    JsonFileRepository(ITEM_RATINGS_JSON_PATH).save_item_ratings(bonuses, games)

    print("\n" + "=" * 50)
    print("✓ 작업 완료!")
    print(f"  - 검색 결과: {page.total_count}개")
    print(f"  - 페이지: {page.page}/{page.total_pages}")
    print(f"  - 적용 필터: {query.filters.active_count()}개")
    print(f"  - 보너스 / 게임 평점: {len(bonuses)}개 / {len(games)}개")
    print(f"저장 경로: {OUTPUT_JSON_PATH}")
    print("=" * 50)


def run():
    """콘솔 스크립트 진입점 (중단/오류 시 종료 코드 1)"""
    try:
        main()
    except KeyboardInterrupt:
        print("\n⚠️  사용자에 의해 중단되었습니다.")
        sys.exit(1)
    except Exception as e:
        print(f"\n❌ 오류 발생: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    run()
