from .enemy_bug import EnemyBug

__all__ = ['EnemyBug']
