def not_deleted(model):
    """소프트 삭제되지 않은 레코드만 남기는 조건. 모든 조회 경로가 이 조건을 공유합니다."""
    return model.is_deleted == False  # noqa: E712
