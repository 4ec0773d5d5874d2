#!/usr/bin/env python3
"""
Elasticsearch record store - implements RecordStoreInterface

Each discipline lives in its own index (``<prefix>-rides``, ``<prefix>-runs``,
...). Documents are the JSON dump of the session models.
"""
from elasticsearch import Elasticsearch
from elasticsearch.helpers import scan
from typing import Dict, List, Any, Optional
from datetime import datetime

from .interface import RecordStoreInterface, Discipline, StorageError
from .model import SessionRecord, discipline_of, parse_record
from ..const import DEFAULT_INDEX_PREFIX, DISCIPLINE_INDEX_SUFFIXES, DEFAULT_SCAN_BATCH_SIZE
from ..utils import get_logger


logger = get_logger(__name__)


class ElasticsearchRecordStore(RecordStoreInterface):
    """Elasticsearch record store implementation"""

    def __init__(self, client: Optional[Elasticsearch] = None,
                 index_prefix: str = DEFAULT_INDEX_PREFIX,
                 scan_batch_size: int = DEFAULT_SCAN_BATCH_SIZE):
        self.es: Optional[Elasticsearch] = client
        self.scan_batch_size = scan_batch_size
        self.index_names = self._build_index_names(index_prefix)

    @staticmethod
    def _build_index_names(prefix: str) -> Dict[Discipline, str]:
        return {
            discipline: f"{prefix}-{DISCIPLINE_INDEX_SUFFIXES[discipline.value]}"
            for discipline in Discipline
        }

    def initialize(self, config: Dict[str, Any]) -> bool:
        """Initialize Elasticsearch connection"""
        try:
            if config.get('index_prefix'):
                self.index_names = self._build_index_names(config['index_prefix'])

            hosts = config.get('hosts', ['http://localhost:9200'])
            if isinstance(hosts, list):
                hosts = [host if host.startswith(('http://', 'https://'))
                        else f"http://{host}" for host in hosts]

            es_config = {
                'hosts': hosts,
                'request_timeout': config.get('timeout', 30),
                'max_retries': config.get('max_retries', 3),
                'retry_on_timeout': config.get('retry_on_timeout', True),
                'verify_certs': config.get('verify_certs', False)
            }

            # Only use auth if both username and password are provided
            if config.get('username') and config.get('password'):
                es_config['basic_auth'] = (config['username'], config['password'])

            self.es = Elasticsearch(**es_config)

            if not self.es.ping():
                raise StorageError("Cannot connect to Elasticsearch")

            cluster_info = self.es.info()
            logger.info(f"✅ Connected to Elasticsearch cluster: {cluster_info['cluster_name']}")

            return True

        except StorageError:
            raise
        except Exception as e:
            logger.error(f"❌ Failed to initialize Elasticsearch: {e}")
            raise StorageError(f"Elasticsearch initialization failed: {e}")

    def create_indices(self, force_recreate: bool = False) -> bool:
        """Create one index per discipline"""
        try:
            for discipline, index_name in self.index_names.items():
                if self.es.indices.exists(index=index_name):
                    if force_recreate:
                        self.es.indices.delete(index=index_name)
                        logger.info(f"🗑️ Deleted existing index: {index_name}")
                    else:
                        logger.info(f"📋 Index already exists: {index_name}")
                        continue

                self.es.indices.create(index=index_name, **self._index_mapping(discipline))
                logger.info(f"✅ Created index: {index_name}")

            return True

        except Exception as e:
            logger.error(f"❌ Failed to create indices: {e}")
            raise StorageError(f"Index creation failed: {e}")

    def index_session(self, record: SessionRecord) -> bool:
        """Index a single session record"""
        discipline = discipline_of(record)
        try:
            document = record.model_dump(mode="json")
            document['indexed_at'] = datetime.now().isoformat()

            response = self.es.index(
                index=self.index_names[discipline],
                id=record.id,
                document=document
            )

            return response['result'] in ['created', 'updated']

        except Exception as e:
            logger.error(f"❌ Failed to index {discipline.value} session {record.id}: {e}")
            return False

    def fetch_all(self, discipline: Discipline) -> List[SessionRecord]:
        """Fetch every session of a discipline

        Scrolls through the whole index in pages of ``scan_batch_size``.
        Hits come back in index order; callers sort.
        """
        index_name = self.index_names[discipline]
        try:
            hits = list(scan(
                self.es,
                index=index_name,
                query={"query": {"match_all": {}}},
                size=self.scan_batch_size
            ))
        except Exception as e:
            logger.error(f"❌ Scan failed on {index_name}: {e}")
            raise StorageError(f"Scan failed: {e}")

        logger.debug(f"🔍 Read {len(hits)} documents from {index_name}")

        records = []
        for hit in hits:
            source = dict(hit['_source'])
            source.pop('indexed_at', None)
            source.setdefault('id', hit.get('_id'))
            try:
                records.append(parse_record(discipline, source))
            except ValueError as e:
                logger.warning(f"Skipping invalid {discipline.value} document {hit.get('_id')}: {e}")

        return records

    def _index_mapping(self, discipline: Discipline) -> Dict[str, Any]:
        """Get index mapping definition"""
        properties = {
            "id": {"type": "keyword"},
            "start_date": {"type": "date"},
            "end_date": {"type": "date"},
            "indexed_at": {"type": "date"},
            "name": {"type": "text"},
            "notes": {"type": "text"},
        }
        if discipline is Discipline.SHOOTING:
            properties.update({
                "target_type": {"type": "keyword"},
                "distance": {"type": "float"},
                "number_of_ends": {"type": "integer"},
                "arrows_per_end": {"type": "integer"},
                "ends": {"type": "object", "enabled": False},
            })
        else:
            properties.update({
                "total_distance": {"type": "float"},
                "total_duration": {"type": "float"},
                "average_heart_rate": {"type": "integer"},
                "max_heart_rate": {"type": "integer"},
            })
        return {"mappings": {"properties": properties}}
