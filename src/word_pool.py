"""Built-in pool of basic Portuguese words with clues."""

from __future__ import annotations

from models import Candidate

_ENTRIES: list[tuple[str, str]] = [
    ("CASA", "Lugar onde moramos"),
    ("GATO", "Animal de estimação que mia"),
    ("CACHORRO", "Melhor amigo do homem"),
    ("SAPO", "Anfíbio que coaxa"),
    ("TATU", "Animal com carapaça que cava buracos"),
    ("RATO", "Pequeno roedor que gosta de queijo"),
    ("ÁGUA", "Líquido essencial para a vida"),
    ("SOL", "Estrela que ilumina o dia"),
    ("LUA", "Aparece no céu à noite"),
    ("MAR", "Grande extensão de água salgada"),
    ("PRAIA", "Areia à beira do mar"),
    ("LIVRO", "Objeto com páginas para ler"),
    ("ESCOLA", "Lugar onde se aprende"),
    ("AMIGO", "Pessoa em quem confiamos"),
    ("FAMÍLIA", "Pais, filhos e avós"),
    ("MESA", "Móvel onde fazemos as refeições"),
    ("CADEIRA", "Móvel para sentar"),
    ("JANELA", "Abertura na parede para ver lá fora"),
    ("PORTA", "Por onde entramos em casa"),
    ("CARRO", "Veículo de quatro rodas"),
    ("TREM", "Transporte que anda sobre trilhos"),
    ("AVIÃO", "Transporte que voa"),
    ("BARCO", "Transporte que navega"),
    ("FLOR", "Parte colorida da planta"),
    ("ÁRVORE", "Planta grande com tronco"),
    ("FRUTA", "Alimento doce que nasce das plantas"),
    ("BANANA", "Fruta amarela e comprida"),
    ("LARANJA", "Fruta cítrica de cor alaranjada"),
    ("MAÇÃ", "Fruta vermelha ou verde"),
    ("PÃO", "Alimento feito de farinha e assado"),
    ("LEITE", "Bebida branca que vem da vaca"),
    ("QUEIJO", "Alimento feito de leite"),
    ("ARROZ", "Grão branco muito comum no prato"),
    ("FEIJÃO", "Grão que acompanha o arroz"),
    ("CAFÉ", "Bebida escura da manhã"),
    ("BOLO", "Doce de aniversário"),
    ("CHUVA", "Água que cai do céu"),
    ("VENTO", "Ar em movimento"),
    ("NUVEM", "Fica no céu e traz chuva"),
    ("NOITE", "Período sem sol"),
    ("DIA", "Período com sol"),
    ("TEMPO", "O relógio o mede"),
    ("MÚSICA", "Arte dos sons"),
    ("DANÇA", "Movimento ao ritmo da música"),
    ("FESTA", "Celebração com amigos"),
    ("CIDADE", "Lugar com muitas ruas e prédios"),
    ("RUA", "Caminho entre as casas"),
    ("PONTE", "Liga as duas margens de um rio"),
    ("RIO", "Curso de água doce"),
    ("MONTANHA", "Elevação alta de terra"),
    ("PEIXE", "Animal que vive na água"),
    ("PÁSSARO", "Animal com penas que voa"),
    ("CAVALO", "Animal que se pode montar"),
    ("VACA", "Animal que dá leite"),
    ("PATO", "Ave que nada e faz quá-quá"),
    ("OLHO", "Órgão da visão"),
    ("MÃO", "Tem cinco dedos"),
    ("CABEÇA", "Parte do corpo onde fica o cérebro"),
    ("CORAÇÃO", "Órgão que bombeia o sangue"),
    ("SAPATO", "Calçado para os pés"),
    ("CAMISA", "Roupa com mangas e botões"),
    ("CHAPÉU", "Acessório para a cabeça"),
    ("LÁPIS", "Objeto para escrever e desenhar"),
    ("PAPEL", "Folha onde se escreve"),
    ("JOGO", "Atividade para se divertir"),
    ("BOLA", "Objeto redondo do futebol"),
    ("VERDE", "Cor da grama"),
    ("AZUL", "Cor do céu"),
    ("AMARELO", "Cor do sol nos desenhos"),
    ("VERMELHO", "Cor do morango"),
]

PORTUGUESE_WORDS: tuple[Candidate, ...] = tuple(
    Candidate(word=word, clue=clue) for word, clue in _ENTRIES
)


def default_pool() -> list[Candidate]:
    """Return a fresh copy of the built-in pool."""
    return list(PORTUGUESE_WORDS)
