"""002: create coins table

Revision ID: 002
Revises: 001
Create Date: 2026-10-18
"""
from typing import Sequence, Union
from alembic import op

revision: str = "002"
down_revision: Union[str, None] = "001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute("""
        CREATE TABLE coins (
            id                  SERIAL          PRIMARY KEY,
            account_address     VARCHAR(66)     NOT NULL,
            module_name         TEXT            NOT NULL,
            struct_name         TEXT            NOT NULL,
            symbol              TEXT,
            name                TEXT,
            decimals            SMALLINT,
            created_at          TIMESTAMPTZ     NOT NULL DEFAULT NOW(),
            CONSTRAINT uq_coins_identity        UNIQUE (account_address, module_name, struct_name),
            CONSTRAINT ck_coins_identity_nonempty CHECK (
                account_address <> '' AND module_name <> '' AND struct_name <> ''
            ),
            CONSTRAINT ck_coins_decimals_gte_0  CHECK (decimals IS NULL OR decimals >= 0)
        );
    """)
    op.execute("""
        CREATE TRIGGER trg_coins_immutable
            BEFORE UPDATE OR DELETE ON coins
            FOR EACH ROW EXECUTE FUNCTION fn_reject_mutation();
    """)
    op.execute("COMMENT ON TABLE coins IS 'Fungible assets, written once on first observation';")


def downgrade() -> None:
    op.execute("DROP TABLE IF EXISTS coins CASCADE;")
