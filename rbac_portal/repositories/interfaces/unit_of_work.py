from abc import ABC, abstractmethod

class IUnitOfWork(ABC):
    """
    여러 리포지토리 쓰기를 하나의 트랜잭션으로 묶는 작업 단위입니다.

    사용법:
        with uow:
            role_repo.create(role)
            role_permission_repo.create_all(bindings)
        # 정상 종료 시 커밋, 예외 발생 시 롤백 후 예외를 그대로 전파합니다.
    """

    def __enter__(self) -> "IUnitOfWork":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        if exc_type is None:
            self.commit()
        else:
            self.rollback()
        return False

    @abstractmethod
    def commit(self):
        pass

    @abstractmethod
    def rollback(self):
        pass
