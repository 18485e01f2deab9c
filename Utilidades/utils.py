import math

# Acima disso a grade teria ceil(2 * V) + 1 linhas horizontais, demais para um gráfico legível.
AMPLITUDE_MAXIMA = 1000.0


def text_to_binary(text):
    """
    Converte uma string de texto para uma sequência contínua de bits (ASCII 8 bits por caractere).
    Permite plotar a codificação de uma mensagem de texto em vez de bits digitados.

    Args:
        text (str): Texto de entrada.

    Returns:
        str: String de bits concatenados (ex: "0100100001100101...").
    """
    return ''.join(format(ord(char), '08b') for char in text)


def is_binary_string(bits):
    """Indica se a string contém apenas '0's e '1's (string vazia é considerada binária)."""
    return all(bit in '01' for bit in bits)


def parse_amplitude(value):
    """
    Converte a amplitude informada pelo usuário em float, exigindo 0 < valor <= AMPLITUDE_MAXIMA.
    A renderização divide pela amplitude, então 0, vazio ou NaN são rejeitados aqui, antes do plot;
    o limite superior mantém a quantidade de linhas da grade plotável.

    Args:
        value (str | float | None): Valor digitado no campo de tensão.

    Returns:
        float: Amplitude válida (V).

    Raises:
        ValueError: se o valor estiver ausente, não for numérico, for infinito/NaN, <= 0 ou maior que AMPLITUDE_MAXIMA.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValueError("Informe a tensão (amplitude) do sinal.")
    try:
        amplitude = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"Tensão inválida: {value!r}")
    if not math.isfinite(amplitude) or amplitude <= 0:
        raise ValueError(f"A tensão deve ser um número maior que zero (recebido {value!r}).")
    if amplitude > AMPLITUDE_MAXIMA:
        raise ValueError(f"A tensão máxima plotável é {AMPLITUDE_MAXIMA:g} V (recebido {value!r}).")
    return amplitude


def format_log(data_str, max_len=64):
    """
    Trunca strings longas no meio para facilitar visualização em logs.
    Útil para logar grandes sequências de bits de forma legível.
    """
    if len(data_str) > max_len:
        return f"{data_str[:(max_len-3)//2]}...{data_str[-(max_len-3)//2:]}"
    return data_str
