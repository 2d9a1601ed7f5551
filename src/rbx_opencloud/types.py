"""共通の型エイリアス。"""

UniverseId = int
GroupId = int
