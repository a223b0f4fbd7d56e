GREETING_TEXT = "Hello from legacy Ubuntu\n"

# имя таблицы то же, что выводил JPA из имени сущности
PING_TABLE = "ping_record"
